# fitlife/controller/daily_log_controller.py
from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from fitlife.services.daily_log_service import DailyLogService
from fitlife.utils.jwt_utils import get_current_user_id

daily_log_bp = Blueprint("daily_log_bp", __name__, url_prefix="/api/logs")


@daily_log_bp.route("/water", methods=["POST"])
@jwt_required()
def add_water():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    data = request.get_json(silent=True) or {}
    log = DailyLogService.add_water(user_id, data.get("amount"))
    return jsonify({
        "success": True,
        "message": "Water intake logged successfully",
        "log": log.to_dict()
    }), 200


@daily_log_bp.route("/calories", methods=["POST"])
@jwt_required()
def add_calories():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    data = request.get_json(silent=True) or {}
    log = DailyLogService.add_calories(user_id, data.get("amount"))
    return jsonify({
        "success": True,
        "message": "Calories logged successfully",
        "log": log.to_dict()
    }), 200


@daily_log_bp.route("/workout", methods=["POST"])
@jwt_required()
def add_workout():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    data = request.get_json(silent=True) or {}
    log = DailyLogService.add_workout(user_id, data)
    return jsonify({
        "success": True,
        "message": "Workout logged successfully",
        "log": log.to_dict()
    }), 200


@daily_log_bp.route("/weight", methods=["POST"])
@jwt_required()
def add_weight():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    data = request.get_json(silent=True) or {}
    log, profile = DailyLogService.add_weight(user_id, data.get("weight"))

    updated_profile = None
    if profile:
        updated_profile = {
            "weight": profile.weight,
            "bmi": profile.bmi,
            "bmiCategory": profile.bmi_category.value,
            "recommendedCalories": profile.recommended_calories,
        }

    return jsonify({
        "success": True,
        "message": "Weight logged successfully",
        "log": log.to_dict(),
        "updatedProfile": updated_profile
    }), 200


@daily_log_bp.route("/today", methods=["GET"])
@jwt_required()
def get_today_log():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    log = DailyLogService.get_or_create_today_log(user_id)
    return jsonify({"success": True, "log": log.to_dict()}), 200


@daily_log_bp.route("/range", methods=["GET"])
@jwt_required()
def get_logs_by_date_range():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    start_date = request.args.get("startDate")
    end_date = request.args.get("endDate")

    logs = DailyLogService.get_logs_by_date_range(user_id, start_date, end_date)
    return jsonify({
        "success": True,
        "count": len(logs),
        "logs": [log.to_dict() for log in logs]
    }), 200
