from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from fitlife.services.recommendation_service import RecommendationService
from fitlife.utils.jwt_utils import get_current_user_id

recommendation_bp = Blueprint("recommendation_bp", __name__, url_prefix="/api/recommendations")


@recommendation_bp.route("/exercise", methods=["GET"])
@jwt_required()
def get_exercise_recommendations():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    return jsonify({"success": True, **RecommendationService.exercise(user_id)}), 200


@recommendation_bp.route("/diet", methods=["GET"])
@jwt_required()
def get_diet_recommendations():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    diet_type = request.args.get("dietType")
    return jsonify({"success": True, **RecommendationService.diet(user_id, diet_type)}), 200


@recommendation_bp.route("/complete", methods=["GET"])
@jwt_required()
def get_complete_recommendations():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    diet_type = request.args.get("dietType")
    return jsonify({"success": True, **RecommendationService.complete(user_id, diet_type)}), 200
