import pytest
from sqlalchemy import create_engine

from agri_solution.database import Store
from agri_solution.errors import ConflictError, ConstraintError, NotFoundError, StoreError, ValidationError
from agri_solution.services import orders, payments, products, users

from conftest import RecordingStore


@pytest.mark.parametrize("call,data", [
    (users.create_user, {"name": "Awa"}),
    (users.update_user, {"id": 1, "email": "awa@agrisolution.sn"}),
    (users.delete_user, {}),
    (products.create_product, {"name": "Hoe", "stock": 1}),
    (products.update_product, {"name": "Hoe", "price": 1, "stock": 1}),
    (products.delete_product, {"id": None}),
    (orders.save_order, {"total_price": 10}),
    (orders.update_order_status, {"status": "shipped"}),
    (orders.delete_order, {"id": ""}),
    (payments.create_payment, {"order_id": 1, "amount": 5}),
])
def test_missing_fields_issue_no_query(store, call, data):
    with pytest.raises(ValidationError):
        call(store, data)
    assert store.calls == []


def test_payment_status_update_requires_status(store):
    with pytest.raises(ValidationError):
        payments.update_payment_status(store, 3, {"status": None})
    assert store.calls == []


def test_duplicate_email_never_inserts():
    store = RecordingStore(rows=[{"id": 1}])
    with pytest.raises(ConflictError):
        users.create_user(store, {"name": "Awa", "email": "awa@agrisolution.sn"})
    assert len(store.calls) == 1
    assert store.calls[0][0].startswith("SELECT")


def test_concurrent_duplicate_insert_is_conflict():
    store = RecordingStore(fail_on="INSERT")
    with pytest.raises(ConflictError) as exc:
        users.create_user(store, {"name": "Awa", "email": "awa@agrisolution.sn"})
    assert exc.value.message == "Cet email est déjà utilisé."


def test_order_status_defaults_to_pending():
    store = RecordingStore(rows=[{"id": 1, "user_id": 2, "total_price": 10, "status": "pending"}])
    orders.save_order(store, {"user_id": 2, "total_price": 10})
    assert store.calls[0][1]["status"] == "pending"


def test_delete_payment_not_found():
    store = RecordingStore(rowcount=0)
    with pytest.raises(NotFoundError):
        payments.delete_payment(store, 5)


def test_store_wraps_driver_errors():
    store = Store(create_engine("sqlite://"))
    with pytest.raises(StoreError) as exc:
        store.query("SELECT * FROM nulle_part")
    assert "no such table" in exc.value.message
    assert exc.value.status_code == 500


def test_store_reports_constraint_violations():
    store = Store(create_engine("sqlite://"))
    store.execute("CREATE TABLE t (email TEXT UNIQUE)")
    store.execute("INSERT INTO t (email) VALUES (:e)", {"e": "a@b.cm"})
    with pytest.raises(ConstraintError):
        store.execute("INSERT INTO t (email) VALUES (:e)", {"e": "a@b.cm"})
