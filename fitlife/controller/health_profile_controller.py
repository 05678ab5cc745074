from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from fitlife.services.health_profile_service import HealthProfileService
from fitlife.utils.jwt_utils import get_current_user_id

health_profile_bp = Blueprint("health_profile", __name__, url_prefix="/api/health")


@health_profile_bp.route("/profile", methods=["GET"])
@jwt_required()
def get_health_profile():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    profile = HealthProfileService.get_profile(user_id)
    return jsonify({"success": True, "profile": profile.to_dict()}), 200


@health_profile_bp.route("/profile", methods=["POST"])
@jwt_required()
def create_health_profile():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    data = request.get_json(silent=True) or {}
    profile = HealthProfileService.create_profile(user_id, data)
    return jsonify({"success": True, "profile": profile.to_dict()}), 201


@health_profile_bp.route("/profile", methods=["PUT"])
@jwt_required()
def update_health_profile():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    data = request.get_json(silent=True) or {}
    profile = HealthProfileService.update_profile(user_id, data)
    return jsonify({"success": True, "profile": profile.to_dict()}), 200
