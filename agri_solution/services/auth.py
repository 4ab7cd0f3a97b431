import secrets

from ..errors import UnauthorizedError
from ..validation import require


def check_credentials(data, username, password):
    """
    Compare les identifiants reçus au couple configuré.

    :param data: corps de la requête (username, password)
    :param username: identifiant attendu
    :param password: mot de passe attendu
    :return: l'utilisateur authentifié, sans jeton ni session
    """
    require(data, ("username", "password"), "Le nom d’utilisateur et le mot de passe sont requis.")

    given_user = str(data["username"])
    given_password = str(data["password"])

    # les deux comparaisons sont toujours évaluées
    user_ok = secrets.compare_digest(given_user.encode(), username.encode())
    password_ok = secrets.compare_digest(given_password.encode(), password.encode())
    if not (user_ok and password_ok):
        raise UnauthorizedError("Identifiants invalides.")

    return {"username": given_user}
