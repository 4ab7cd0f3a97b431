from flask import Blueprint, jsonify

from ..database import get_store
from ..services.products import get_all_products, create_product, update_product, delete_product
from . import json_body

products_bp = Blueprint("products", __name__)


# ----------------------------
# Produits
# ----------------------------
@products_bp.route("/api/products", methods=["GET"])
def liste_produits():
    return jsonify({"products": get_all_products(get_store())})


@products_bp.route("/api/products", methods=["POST"])
def nouveau_produit():
    product = create_product(get_store(), json_body())
    return jsonify({"message": "Produit ajouté avec succès !", "product": product}), 201


@products_bp.route("/api/products", methods=["PUT"])
def maj_produit():
    product = update_product(get_store(), json_body())
    return jsonify({"message": "Produit mis à jour avec succès !", "product": product})


@products_bp.route("/api/products", methods=["DELETE"])
def suppression_produit():
    product = delete_product(get_store(), json_body())
    return jsonify({"message": "Produit supprimé avec succès !", "product": product})
