from flask import Blueprint, jsonify

from ..database import get_store
from ..services.payments import (
    get_all_payments, get_payment, create_payment, update_payment_status, delete_payment
)
from . import json_body

payments_bp = Blueprint("payments", __name__)


# ----------------------------
# Paiements : la ligne est renvoyée telle quelle
# ----------------------------
@payments_bp.route("/api/payments", methods=["GET"])
def liste_paiements():
    return jsonify(get_all_payments(get_store()))


@payments_bp.route("/api/payments/<int:payment_id>", methods=["GET"])
def detail_paiement(payment_id):
    return jsonify(get_payment(get_store(), payment_id))


@payments_bp.route("/api/payments", methods=["POST"])
def nouveau_paiement():
    return jsonify(create_payment(get_store(), json_body())), 201


@payments_bp.route("/api/payments/<int:payment_id>", methods=["PUT"])
def maj_paiement(payment_id):
    return jsonify(update_payment_status(get_store(), payment_id, json_body()))


@payments_bp.route("/api/payments/<int:payment_id>", methods=["DELETE"])
def suppression_paiement(payment_id):
    delete_payment(get_store(), payment_id)
    return "", 204
