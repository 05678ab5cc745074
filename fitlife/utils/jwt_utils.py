from flask import jsonify
from flask_jwt_extended import get_jwt_identity


def get_current_user_id():
    """User id carried in the verified access token (``sub`` claim)."""
    identity = get_jwt_identity()
    if identity is None:
        return None
    return str(identity)


def register_jwt_callbacks(jwt_manager):
    """Render token failures in the API's {"message": ...} error shape."""

    @jwt_manager.unauthorized_loader
    def missing_token(reason):
        return jsonify({"message": "No token provided, authorization denied"}), 401

    @jwt_manager.invalid_token_loader
    def invalid_token(reason):
        return jsonify({"message": "Invalid token"}), 401

    @jwt_manager.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return jsonify({"message": "Token expired"}), 401
