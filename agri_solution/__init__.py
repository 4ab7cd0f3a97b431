import logging

import click
from flask import Flask

from .config import Config
from .database import Store
from .errors import StoreError, register_error_handlers
from .middleware import init_middleware
from .models import db
from .routes.auth import auth_bp
from .routes.index import index_bp
from .routes.orders import orders_bp
from .routes.payments import payments_bp
from .routes.products import products_bp
from .routes.users import users_bp

logger = logging.getLogger(__name__)


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(level=app.config["LOG_LEVEL"])

    # ---------- Base de données ----------
    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("postgresql"):
        app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", {
            "pool_size": app.config["DB_POOL_SIZE"],
            "pool_pre_ping": True,
        })
    db.init_app(app)
    with app.app_context():
        app.extensions["store"] = Store(db.engine)

    # ---------- Routes ----------
    app.register_blueprint(index_bp)
    app.register_blueprint(users_bp)
    app.register_blueprint(products_bp)
    app.register_blueprint(orders_bp)
    app.register_blueprint(payments_bp)
    app.register_blueprint(auth_bp)

    register_error_handlers(app)
    init_middleware(app)
    register_commands(app)

    logger.info("Application agri_solution initialisée")
    return app


# ---------- CLI ----------
def register_commands(app):

    @app.cli.command("init-db")
    def init_db():
        """Crée les tables manquantes."""
        db.create_all()
        click.echo("Tables créées.")

    @app.cli.command("check-db")
    def check_db():
        """Teste la connexion à la base."""
        try:
            row = app.extensions["store"].query_one("SELECT CURRENT_TIMESTAMP AS now")
        except StoreError as e:
            click.echo(f"Erreur : {e.message}", err=True)
            raise SystemExit(1)
        click.echo(f"Connexion réussie : {row['now']}")
