import logging

from ..errors import ConflictError, ConstraintError, NotFoundError
from ..validation import require, validate_email_field, validate_new_user

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "Cet email est déjà utilisé."
NOT_FOUND = "Utilisateur non trouvé."


# --------------------------------
# Tous les utilisateurs
# --------------------------------
def get_all_users(store):
    return store.query("SELECT * FROM users")


# --------------------------------
# Nouvel utilisateur
# --------------------------------
def create_user(store, data):
    name, email = validate_new_user(data)

    if store.query_one("SELECT id FROM users WHERE email = :email", {"email": email}):
        raise ConflictError(DUPLICATE_EMAIL)

    # la contrainte UNIQUE tranche si deux créations passent la vérification en même temps
    try:
        user = store.query_one(
            "INSERT INTO users (name, email) VALUES (:name, :email) RETURNING *",
            {"name": name, "email": email},
        )
    except ConstraintError:
        raise ConflictError(DUPLICATE_EMAIL)

    logger.info(f"Utilisateur {user['id']} créé")
    return user


# --------------------------------
# Mise à jour
# --------------------------------
def update_user(store, data):
    require(data, ("id", "name", "email"), "Les champs id, name et email sont requis.")
    email = validate_email_field(data)

    try:
        user = store.query_one(
            "UPDATE users SET name = :name, email = :email WHERE id = :id RETURNING *",
            {"name": data["name"], "email": email, "id": data["id"]},
        )
    except ConstraintError:
        raise ConflictError(DUPLICATE_EMAIL)

    if not user:
        raise NotFoundError(NOT_FOUND)

    logger.info(f"Utilisateur {user['id']} mis à jour")
    return user


# --------------------------------
# Suppression
# --------------------------------
def delete_user(store, data):
    require(data, ("id",), "L'ID de l'utilisateur est requis.")

    user = store.query_one("DELETE FROM users WHERE id = :id RETURNING *", {"id": data["id"]})
    if not user:
        raise NotFoundError(NOT_FOUND)

    logger.info(f"Utilisateur {user['id']} supprimé")
    return user
