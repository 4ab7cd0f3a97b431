from flask import Blueprint, jsonify

from ..database import get_store
from ..services.orders import get_all_orders, save_order, update_order_status, delete_order
from . import json_body

orders_bp = Blueprint("orders", __name__)


# ----------------------------
# Toutes les commandes
# ----------------------------
@orders_bp.route("/api/orders", methods=["GET"])
def liste_commandes():
    return jsonify({"orders": get_all_orders(get_store())})


# ----------------------------
# Nouvelle commande
# ----------------------------
@orders_bp.route("/api/orders", methods=["POST"])
def nouvelle_commande():
    order = save_order(get_store(), json_body())
    return jsonify({"message": "Commande créée avec succès !", "order": order}), 201


# ----------------------------
# Mise à jour du statut
# ----------------------------
@orders_bp.route("/api/orders", methods=["PUT"])
def maj_commande():
    order = update_order_status(get_store(), json_body())
    return jsonify({"message": "Commande mise à jour avec succès !", "order": order})


# ----------------------------
# Suppression
# ----------------------------
@orders_bp.route("/api/orders", methods=["DELETE"])
def suppression_commande():
    order = delete_order(get_store(), json_body())
    return jsonify({"message": "Commande supprimée avec succès !", "order": order})
