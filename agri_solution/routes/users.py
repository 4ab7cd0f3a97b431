from flask import Blueprint, jsonify

from ..database import get_store
from ..services.users import get_all_users, create_user, update_user, delete_user
from . import json_body

users_bp = Blueprint("users", __name__)


@users_bp.route("/api/users", methods=["GET"])
def liste_utilisateurs():
    return jsonify({"users": get_all_users(get_store())})


@users_bp.route("/api/users", methods=["POST"])
def nouvel_utilisateur():
    user = create_user(get_store(), json_body())
    return jsonify({"message": "Utilisateur ajouté avec succès !", "user": user}), 201


@users_bp.route("/api/users", methods=["PUT"])
def maj_utilisateur():
    user = update_user(get_store(), json_body())
    return jsonify({"message": "Utilisateur mis à jour avec succès !", "user": user})


@users_bp.route("/api/users", methods=["DELETE"])
def suppression_utilisateur():
    user = delete_user(get_store(), json_body())
    return jsonify({"message": "Utilisateur supprimé avec succès !", "user": user})
