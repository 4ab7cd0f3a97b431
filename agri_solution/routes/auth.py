from flask import Blueprint, current_app, jsonify

from ..services.auth import check_credentials
from . import json_body

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/api/auth/login", methods=["POST"])
def login():
    user = check_credentials(
        json_body(),
        current_app.config["AUTH_USERNAME"],
        current_app.config["AUTH_PASSWORD"],
    )
    return jsonify({"message": "Authentification réussie !", "user": user})
