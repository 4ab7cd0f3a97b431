import logging

from ..errors import NotFoundError
from ..validation import require

logger = logging.getLogger(__name__)

NOT_FOUND = "Paiement non trouvé"


def get_all_payments(store):
    return store.query("SELECT * FROM payments ORDER BY id ASC")


def get_payment(store, payment_id):
    payment = store.query_one("SELECT * FROM payments WHERE id = :id", {"id": payment_id})
    if not payment:
        raise NotFoundError(NOT_FOUND)
    return payment


def create_payment(store, data):
    require(
        data, ("order_id", "amount", "payment_method"),
        "Les champs order_id, amount et payment_method sont requis.",
    )

    payment = store.query_one(
        """
        INSERT INTO payments (order_id, amount, payment_method)
        VALUES (:order_id, :amount, :payment_method) RETURNING *
        """,
        {
            "order_id": data["order_id"],
            "amount": data["amount"],
            "payment_method": data["payment_method"],
        },
    )
    logger.info(f"Paiement {payment['id']} enregistré pour la commande {payment['order_id']}")
    return payment


def update_payment_status(store, payment_id, data):
    require(data, ("status",), "Le champ status est requis.")

    payment = store.query_one(
        "UPDATE payments SET status = :status WHERE id = :id RETURNING *",
        {"status": data["status"], "id": payment_id},
    )
    if not payment:
        raise NotFoundError(NOT_FOUND)

    logger.info(f"Paiement {payment['id']} passé à {payment['status']}")
    return payment


def delete_payment(store, payment_id):
    if store.execute("DELETE FROM payments WHERE id = :id", {"id": payment_id}) == 0:
        raise NotFoundError(NOT_FOUND)
    logger.info(f"Paiement {payment_id} supprimé")
