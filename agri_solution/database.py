import logging
from decimal import Decimal

from flask import current_app
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .errors import ConstraintError, StoreError

logger = logging.getLogger(__name__)


def _plain(value):
    # NUMERIC arrive en Decimal avec psycopg2, on renvoie des nombres JSON
    if isinstance(value, Decimal):
        return float(value)
    return value


def _row_to_dict(row):
    return {key: _plain(value) for key, value in row.items()}


def _driver_message(exc):
    return str(getattr(exc, "orig", None) or exc)


class Store:
    """Accès SQL paramétré sur le pool de connexions de l'engine SQLAlchemy.

    Chaque appel emprunte une connexion, exécute une requête dans sa propre
    transaction et rend la connexion au pool.
    """

    def __init__(self, engine):
        self.engine = engine

    def query(self, sql, params=None):
        """Exécute une requête et renvoie toutes les lignes sous forme de dicts."""
        try:
            with self.engine.begin() as conn:
                result = conn.execute(text(sql), params or {})
                if not result.returns_rows:
                    return []
                return [_row_to_dict(row) for row in result.mappings().all()]
        except IntegrityError as e:
            logger.error(f"Contrainte violée: {_driver_message(e)}")
            raise ConstraintError(_driver_message(e)) from e
        except SQLAlchemyError as e:
            logger.error(f"Erreur SQL: {_driver_message(e)}")
            raise StoreError(_driver_message(e)) from e

    def query_one(self, sql, params=None):
        rows = self.query(sql, params)
        return rows[0] if rows else None

    def execute(self, sql, params=None):
        """Exécute une requête sans lignes en retour, renvoie le nombre de lignes touchées."""
        try:
            with self.engine.begin() as conn:
                return conn.execute(text(sql), params or {}).rowcount
        except IntegrityError as e:
            logger.error(f"Contrainte violée: {_driver_message(e)}")
            raise ConstraintError(_driver_message(e)) from e
        except SQLAlchemyError as e:
            logger.error(f"Erreur SQL: {_driver_message(e)}")
            raise StoreError(_driver_message(e)) from e


def get_store():
    return current_app.extensions["store"]
