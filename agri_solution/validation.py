from email_validator import EmailNotValidError, validate_email

from .errors import ValidationError

NAME_REQUIRED = "Le nom est requis"
EMAIL_REQUIRED = "Un email valide est requis"


def require(data, fields, message, nullable_only=()):
    """Lève ValidationError si un des champs manque.

    Un champ manque s'il est absent, null, vide ou nul. Les champs listés
    dans nullable_only acceptent 0 et ne manquent que s'ils sont absents ou null.
    """
    for field in fields:
        value = data.get(field)
        if field in nullable_only:
            if value is None:
                raise ValidationError(message)
        elif not value:
            raise ValidationError(message)


def normalize_email(email):
    if not isinstance(email, str):
        raise EmailNotValidError("L'email doit être une chaîne de caractères.")
    result = validate_email(email.strip(), check_deliverability=False)
    return result.normalized.lower()


def _field_error(field, value, msg):
    return {"type": "field", "value": value, "msg": msg, "path": field, "location": "body"}


def validate_email_field(data):
    """Vérifie et normalise data["email"] avant une mise à jour."""
    raw_email = data.get("email")
    try:
        return normalize_email(raw_email)
    except EmailNotValidError:
        raise ValidationError("Données invalides.", errors=[_field_error("email", raw_email, EMAIL_REQUIRED)])


def validate_new_user(data):
    """Vérifie name et email d'un nouvel utilisateur, renvoie (name, email) nettoyés."""
    errors = []

    raw_name = data.get("name")
    name = str(raw_name).strip() if raw_name is not None else ""
    if not name:
        errors.append(_field_error("name", raw_name, NAME_REQUIRED))

    raw_email = data.get("email")
    email = None
    try:
        email = normalize_email(raw_email)
    except EmailNotValidError:
        errors.append(_field_error("email", raw_email, EMAIL_REQUIRED))

    if errors:
        raise ValidationError("Données invalides.", errors=errors)

    return name, email
