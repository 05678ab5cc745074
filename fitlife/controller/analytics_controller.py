from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from fitlife.services.analytics_service import AnalyticsService
from fitlife.utils.jwt_utils import get_current_user_id
from fitlife.utils.request_utils import parse_days

analytics_bp = Blueprint("analytics_bp", __name__, url_prefix="/api/analytics")


def _report(aggregator):
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    days = parse_days(request.args.get("days"))
    return jsonify({"success": True, **aggregator(user_id, days)}), 200


@analytics_bp.route("/weight-trend", methods=["GET"])
@jwt_required()
def get_weight_trend():
    return _report(AnalyticsService.weight_trend)


@analytics_bp.route("/water-trend", methods=["GET"])
@jwt_required()
def get_water_trend():
    return _report(AnalyticsService.water_trend)


@analytics_bp.route("/calorie-trend", methods=["GET"])
@jwt_required()
def get_calorie_trend():
    return _report(AnalyticsService.calorie_trend)


@analytics_bp.route("/workout-summary", methods=["GET"])
@jwt_required()
def get_workout_summary():
    return _report(AnalyticsService.workout_summary)


@analytics_bp.route("/dashboard", methods=["GET"])
@jwt_required()
def get_dashboard():
    return _report(AnalyticsService.dashboard)
