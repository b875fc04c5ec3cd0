import logging
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.validation import (
    UNRANKED,
    compute_total_points,
    resolve_tier,
    tier_progress,
    validate_tier,
)
from ..models.participant import Participant
from ..models.participation import ParticipationRecord
from ..models.tier import Tier
from .common import apply, candidate, save, remove

logger = logging.getLogger(__name__)

TIER_FIELDS = ("id", "name", "min_points", "max_points")


def list_tiers(db: Session) -> list[Tier]:
    return list(db.execute(select(Tier).order_by(Tier.min_points)).scalars())


def get_tier(db: Session, tier_id: str) -> Tier | None:
    return db.get(Tier, tier_id)


def create_tier(db: Session, *, name: str, min_points: int, max_points: int) -> Tier:
    t = Tier(name=name, min_points=min_points, max_points=max_points)
    validate_tier(t, list_tiers(db))
    save(db, t, action=f"create tier '{name}'")
    logger.info(f"Tier created: id={t.id}, name={t.name}, range=[{t.min_points}, {t.max_points})")
    return t


def update_tier(db: Session, tier: Tier, **changes) -> Tier:
    changes.pop("id", None)
    validate_tier(candidate(tier, changes, TIER_FIELDS), list_tiers(db))
    apply(tier, changes, TIER_FIELDS)
    save(db, tier, action=f"update tier {tier.id}")
    logger.info(f"Tier updated: id={tier.id}, range=[{tier.min_points}, {tier.max_points})")
    return tier


def delete_tier(db: Session, tier: Tier) -> None:
    remove(db, tier, action=f"delete tier {tier.id}")
    logger.info(f"Tier deleted: id={tier.id}")


def standing_for(db: Session, participant: Participant, *, strict: bool | None = None) -> dict:
    """Total points, current tier and progress toward the next tier.

    ``strict`` defaults to the configured ``TIER_MODE``.
    """
    if strict is None:
        strict = settings.TIER_MODE == "strict"
    records = db.execute(
        select(ParticipationRecord).where(ParticipationRecord.participant_id == participant.id)
    ).scalars()
    total = compute_total_points(participant.id, records)
    tiers = list_tiers(db)
    tier = resolve_tier(total, tiers, strict=strict)
    upcoming, needed = tier_progress(total, tiers)
    return {
        "participant_id": participant.id,
        "total_points": total,
        "tier": tier,
        "tier_name": tier.name if tier else UNRANKED,
        "next_tier": upcoming,
        "points_to_next": needed,
    }
