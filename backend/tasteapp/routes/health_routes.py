from __future__ import annotations

from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

from tasteapp.services.auth_service import get_token_store

health_bp = Blueprint("health", __name__, url_prefix="/api")


@health_bp.get("/health")
def health_check():
    """Lightweight readiness endpoint."""
    token = get_token_store().get()
    return jsonify(
        {
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "authenticated": token is not None and not token.is_expired(),
            "commentary_enabled": bool(current_app.config.get("OPENAI_API_KEY")),
        }
    )
