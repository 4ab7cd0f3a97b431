import pytest

from agri_solution import create_app
from agri_solution.errors import ConstraintError
from agri_solution.models import db


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'agri.db'}",
        "RATE_LIMIT_ENABLED": False,
    })
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


class RecordingStore:
    """Double du Store: enregistre les requêtes et renvoie des lignes préparées."""

    def __init__(self, rows=None, rowcount=1, fail_on=None):
        self.calls = []
        self.rows = rows or []
        self.rowcount = rowcount
        self.fail_on = fail_on

    def query(self, sql, params=None):
        self.calls.append((sql, params))
        if self.fail_on and self.fail_on in sql:
            raise ConstraintError("duplicate key value violates unique constraint")
        return list(self.rows)

    def query_one(self, sql, params=None):
        rows = self.query(sql, params)
        return rows[0] if rows else None

    def execute(self, sql, params=None):
        self.calls.append((sql, params))
        return self.rowcount


@pytest.fixture
def store():
    return RecordingStore()
