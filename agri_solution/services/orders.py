import logging

from ..errors import NotFoundError
from ..validation import require

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "pending"
NOT_FOUND = "Commande non trouvée."


# --------------------------------
# Toutes les commandes
# --------------------------------
def get_all_orders(store):
    return store.query("SELECT * FROM orders")


# --------------------------------
# Nouvelle commande
# --------------------------------
def save_order(store, data):
    require(data, ("user_id", "total_price"), "Les champs user_id et total_price sont requis.")

    order = store.query_one(
        "INSERT INTO orders (user_id, total_price, status) VALUES (:user_id, :total_price, :status) RETURNING *",
        {
            "user_id": data["user_id"],
            "total_price": data["total_price"],
            "status": data.get("status") or DEFAULT_STATUS,
        },
    )
    logger.info(f"Commande {order['id']} créée pour l'utilisateur {order['user_id']}")
    return order


# --------------------------------
# Changement de statut
# --------------------------------
def update_order_status(store, data):
    require(data, ("id", "status"), "Les champs id et status sont requis.")

    order = store.query_one(
        "UPDATE orders SET status = :status WHERE id = :id RETURNING *",
        {"status": data["status"], "id": data["id"]},
    )
    if not order:
        raise NotFoundError(NOT_FOUND)

    logger.info(f"Commande {order['id']} passée à {order['status']}")
    return order


# --------------------------------
# Suppression
# --------------------------------
def delete_order(store, data):
    require(data, ("id",), "L'ID de la commande est requis.")

    order = store.query_one("DELETE FROM orders WHERE id = :id RETURNING *", {"id": data["id"]})
    if not order:
        raise NotFoundError(NOT_FOUND)

    logger.info(f"Commande {order['id']} supprimée")
    return order
