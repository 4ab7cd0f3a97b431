import logging
import threading
import time

from flask import g, request
from flask_cors import CORS

from .errors import RateLimitError

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Trop de requêtes, veuillez réessayer plus tard."

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-XSS-Protection": "0",
    "Cross-Origin-Resource-Policy": "same-origin",
}


class RateLimiter:
    """Fenêtre fixe par client: au plus `limit` requêtes par `window` secondes."""

    def __init__(self, limit, window, clock=time.monotonic):
        self.limit = limit
        self.window = window
        self._clock = clock
        self._lock = threading.Lock()
        self._windows = {}
        self._last_sweep = clock()

    def hit(self, key):
        """Compte une requête, renvoie (autorisée, restantes, secondes avant reset)."""
        now = self._clock()
        with self._lock:
            if now - self._last_sweep >= self.window:
                self._sweep(now)

            started, count = self._windows.get(key, (now, 0))
            if now - started >= self.window:
                started, count = now, 0

            reset_in = max(int(started + self.window - now), 1)
            if count >= self.limit:
                return False, 0, reset_in

            count += 1
            self._windows[key] = (started, count)
            return True, self.limit - count, reset_in

    def _sweep(self, now):
        # au plus une fois par fenêtre, appelé sous le verrou
        self._windows = {
            key: (started, count)
            for key, (started, count) in self._windows.items()
            if now - started < self.window
        }
        self._last_sweep = now

    def __len__(self):
        with self._lock:
            return len(self._windows)

    def reset(self):
        with self._lock:
            self._windows.clear()


def cors_origins(value):
    if value.strip() == "*":
        return "*"
    return [origin.strip() for origin in value.split(",") if origin.strip()]


# --------------------------------
# Hooks avant / après requête
# --------------------------------
def init_middleware(app):
    CORS(
        app,
        origins=cors_origins(app.config["CORS_ORIGINS"]),
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    limiter = RateLimiter(app.config["RATE_LIMIT_MAX"], app.config["RATE_LIMIT_WINDOW"])
    app.extensions["rate_limiter"] = limiter

    @app.before_request
    def limit_requests():
        if not app.config["RATE_LIMIT_ENABLED"]:
            return None

        client = request.remote_addr or "unknown"
        allowed, remaining, reset_in = limiter.hit(client)
        g.rate_limit_remaining = remaining
        if not allowed:
            logger.warning(f"Limite de requêtes atteinte pour {client}")
            raise RateLimitError(RATE_LIMIT_MESSAGE, retry_after=reset_in)
        return None

    @app.after_request
    def add_headers(response):
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)

        if app.config["RATE_LIMIT_ENABLED"]:
            response.headers["RateLimit-Limit"] = str(limiter.limit)
            response.headers["RateLimit-Remaining"] = str(g.get("rate_limit_remaining", 0))
        return response

    return limiter
