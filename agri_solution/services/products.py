import logging

from ..errors import NotFoundError
from ..validation import require

logger = logging.getLogger(__name__)

NOT_FOUND = "Produit non trouvé."


def get_all_products(store):
    return store.query("SELECT * FROM products")


def create_product(store, data):
    require(
        data, ("name", "price", "stock"),
        "Les champs name, price et stock sont requis.",
        nullable_only=("stock",),
    )

    product = store.query_one(
        "INSERT INTO products (name, price, stock) VALUES (:name, :price, :stock) RETURNING *",
        {"name": data["name"], "price": data["price"], "stock": data["stock"]},
    )
    logger.info(f"Produit {product['id']} créé")
    return product


def update_product(store, data):
    require(
        data, ("id", "name", "price", "stock"),
        "Les champs id, name, price et stock sont requis.",
        nullable_only=("stock",),
    )

    product = store.query_one(
        "UPDATE products SET name = :name, price = :price, stock = :stock WHERE id = :id RETURNING *",
        {"name": data["name"], "price": data["price"], "stock": data["stock"], "id": data["id"]},
    )
    if not product:
        raise NotFoundError(NOT_FOUND)

    logger.info(f"Produit {product['id']} mis à jour")
    return product


def delete_product(store, data):
    require(data, ("id",), "L'ID du produit est requis.")

    product = store.query_one("DELETE FROM products WHERE id = :id RETURNING *", {"id": data["id"]})
    if not product:
        raise NotFoundError(NOT_FOUND)

    logger.info(f"Produit {product['id']} supprimé")
    return product
