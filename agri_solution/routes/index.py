from flask import Blueprint

index_bp = Blueprint("index", __name__)


@index_bp.route("/")
def index():
    return "Le serveur tourne bien ! 🚀", 200, {"Content-Type": "text/plain; charset=utf-8"}
