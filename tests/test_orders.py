import pytest


@pytest.fixture
def user_id(client):
    res = client.post("/api/users", json={"name": "Espoir", "email": "espoir@agrisolution.cm"})
    return res.get_json()["user"]["id"]


def test_create_order_defaults_to_pending(client, user_id):
    res = client.post("/api/orders", json={"user_id": user_id, "total_price": 49.9})
    assert res.status_code == 201
    body = res.get_json()
    assert body["message"] == "Commande créée avec succès !"
    assert body["order"]["status"] == "pending"
    assert body["order"]["user_id"] == user_id
    assert body["order"]["total_price"] == 49.9


def test_create_order_keeps_given_status(client, user_id):
    res = client.post("/api/orders", json={"user_id": user_id, "total_price": 20, "status": "Payée"})
    assert res.status_code == 201
    assert res.get_json()["order"]["status"] == "Payée"


def test_create_order_missing_total(client, user_id):
    res = client.post("/api/orders", json={"user_id": user_id})
    assert res.status_code == 400
    assert res.get_json() == {"error": "Les champs user_id et total_price sont requis."}
    assert client.get("/api/orders").get_json() == {"orders": []}


def test_update_order_status(client, user_id):
    order_id = client.post(
        "/api/orders", json={"user_id": user_id, "total_price": 20}
    ).get_json()["order"]["id"]
    res = client.put("/api/orders", json={"id": order_id, "status": "shipped"})
    assert res.status_code == 200
    body = res.get_json()
    assert body["message"] == "Commande mise à jour avec succès !"
    assert body["order"]["status"] == "shipped"


def test_update_unknown_order(client):
    res = client.put("/api/orders", json={"id": 999, "status": "shipped"})
    assert res.status_code == 404
    assert res.get_json() == {"error": "Commande non trouvée."}


def test_update_order_requires_status(client):
    res = client.put("/api/orders", json={"id": 1})
    assert res.status_code == 400
    assert res.get_json() == {"error": "Les champs id et status sont requis."}


def test_delete_order(client, user_id):
    order = client.post(
        "/api/orders", json={"user_id": user_id, "total_price": 20}
    ).get_json()["order"]
    res = client.delete("/api/orders", json={"id": order["id"]})
    assert res.status_code == 200
    assert res.get_json() == {"message": "Commande supprimée avec succès !", "order": order}

    res = client.delete("/api/orders", json={"id": order["id"]})
    assert res.status_code == 404
    assert res.get_json() == {"error": "Commande non trouvée."}
