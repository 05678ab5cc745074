import logging
from datetime import datetime, timedelta

from sqlalchemy.exc import IntegrityError

from fitlife.enums.app_enum import ChallengeTypeEnum, parse_enum
from fitlife.errors import ConflictError, NotFoundError, ValidationError
from fitlife.extensions import db
from fitlife.models.challenge import Challenge
from fitlife.services.challenge_generator import generate_challenge
from fitlife.services.health_profile_service import HealthProfileService
from fitlife.utils.date_utils import get_week_start, local_today
from fitlife.utils.utils import round_half_up

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 50


def get_period_anchor(challenge_type, today):
    if ChallengeTypeEnum(challenge_type) == ChallengeTypeEnum.weekly:
        return get_week_start(today)
    return today


def find_challenge(user_id: str, challenge_type, date_assigned):
    return Challenge.query.filter_by(
        user_id=user_id,
        type=challenge_type,
        date_assigned=date_assigned
    ).first()


class ChallengeService:

    @staticmethod
    def get_or_create(user_id: str, challenge_type, today=None, rng=None):
        """
        Return the user's challenge for the current day or week, generating
        one from the health profile the first time it is requested.
        """
        challenge_type = ChallengeTypeEnum(challenge_type)
        anchor = get_period_anchor(challenge_type, today or local_today())

        challenge = find_challenge(user_id, challenge_type, anchor)
        if challenge:
            return challenge

        profile = HealthProfileService.require_profile(user_id)
        data = generate_challenge(challenge_type, profile.bmi_category, profile.goals, rng)

        challenge = Challenge(
            user_id=user_id,
            type=challenge_type,
            title=data["title"],
            description=data["description"],
            date_assigned=anchor,
            is_completed=False
        )
        db.session.add(challenge)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            challenge = find_challenge(user_id, challenge_type, anchor)
            if challenge is None:
                raise
            logger.warning(
                "[ChallengeService] Lost create race for %s %s challenge on %s, using existing one",
                user_id, challenge_type.value, anchor
            )
            return challenge

        logger.info(
            "[ChallengeService] Assigned %s challenge %r to %s for %s",
            challenge_type.value, challenge.title, user_id, anchor
        )
        return challenge

    @staticmethod
    def complete(user_id: str, challenge_id):
        try:
            challenge_id = int(challenge_id)
        except (TypeError, ValueError):
            raise NotFoundError("Challenge not found")

        challenge = Challenge.query.filter_by(id=challenge_id, user_id=user_id).first()
        if not challenge:
            raise NotFoundError("Challenge not found")
        if challenge.is_completed:
            raise ConflictError("Challenge already completed")

        # Conditional UPDATE: only one request can flip the flag
        updated = (
            Challenge.query
            .filter_by(id=challenge_id, user_id=user_id, is_completed=False)
            .update(
                {Challenge.is_completed: True, Challenge.updated_at: datetime.utcnow()},
                synchronize_session=False
            )
        )
        db.session.commit()
        if not updated:
            raise ConflictError("Challenge already completed")

        logger.info("[ChallengeService] %s completed challenge %s", user_id, challenge_id)
        return challenge

    @staticmethod
    def history(user_id: str, days: int, challenge_type=None, today=None):
        since = (today or local_today()) - timedelta(days=days)

        query = (
            Challenge.query
            .filter(Challenge.user_id == user_id)
            .filter(Challenge.date_assigned >= since)
        )

        if challenge_type:
            member = parse_enum(ChallengeTypeEnum, challenge_type)
            if member is None:
                raise ValidationError('Invalid challenge type. Use "Daily" or "Weekly".')
            query = query.filter(Challenge.type == member)

        challenges = (
            query
            .order_by(Challenge.date_assigned.desc(), Challenge.id.desc())
            .limit(HISTORY_LIMIT)
            .all()
        )

        completed = sum(1 for c in challenges if c.is_completed)
        total = len(challenges)

        return challenges, {
            "total": total,
            "completed": completed,
            "pending": total - completed,
            "completionRate": round_half_up(completed / total * 100) if total else 0,
        }
