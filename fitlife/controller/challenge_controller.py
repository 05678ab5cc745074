from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from fitlife.enums.app_enum import ChallengeTypeEnum
from fitlife.services.challenge_service import ChallengeService
from fitlife.utils.jwt_utils import get_current_user_id
from fitlife.utils.request_utils import parse_days

challenge_bp = Blueprint("challenge_bp", __name__, url_prefix="/api/challenges")


@challenge_bp.route("/daily", methods=["GET"])
@jwt_required()
def get_daily_challenge():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    challenge = ChallengeService.get_or_create(user_id, ChallengeTypeEnum.daily)
    return jsonify({"success": True, "challenge": challenge.to_dict()}), 200


@challenge_bp.route("/weekly", methods=["GET"])
@jwt_required()
def get_weekly_challenge():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    challenge = ChallengeService.get_or_create(user_id, ChallengeTypeEnum.weekly)
    return jsonify({"success": True, "challenge": challenge.to_dict()}), 200


@challenge_bp.route("/complete/<challenge_id>", methods=["PUT"])
@jwt_required()
def complete_challenge(challenge_id):
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    challenge = ChallengeService.complete(user_id, challenge_id)
    return jsonify({
        "success": True,
        "message": "Challenge completed successfully! 🎉",
        "challenge": challenge.to_dict()
    }), 200


@challenge_bp.route("/history", methods=["GET"])
@jwt_required()
def get_challenge_history():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"message": "User not authenticated"}), 401

    days = parse_days(request.args.get("days"))
    challenges, stats = ChallengeService.history(user_id, days, request.args.get("type"))
    return jsonify({
        "success": True,
        "challenges": [c.to_dict() for c in challenges],
        "stats": stats
    }), 200
