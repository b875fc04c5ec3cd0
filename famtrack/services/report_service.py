"""
Aggregates for the dashboard and reports pages.

Totals are computed in Python from the participation records with the same
pure helpers used elsewhere, so a report always agrees with a participant's
standing for the same date range. Reports never fail on tier gaps: totals
outside every tier are shown as ``Unranked``.
"""
import logging
from collections import Counter
from datetime import date

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from ..core.validation import UNRANKED, resolve_tier, summarize_points
from ..models.activity import Activity
from ..models.family import Family
from ..models.participant import Participant
from ..models.participation import ParticipationRecord
from .participation_service import list_records
from .tier_service import list_tiers

logger = logging.getLogger(__name__)


def _count(db: Session, model) -> int:
    return db.execute(select(func.count()).select_from(model)).scalar_one()


def leaderboard(db: Session, *, start: date | None = None, end: date | None = None) -> list[dict]:
    """Every participant ranked by total points within the date range."""
    records = list_records(db, start=start, end=end)
    totals = summarize_points(records)
    record_counts = Counter(r.participant_id for r in records)
    tiers = list_tiers(db)
    families = {f.id: f.name for f in db.execute(select(Family)).scalars()}

    participants = db.execute(select(Participant)).scalars().all()
    ordered = sorted(
        participants,
        key=lambda p: (-totals.get(p.id, 0), p.last_name, p.first_name),
    )
    rows = []
    for rank, p in enumerate(ordered, start=1):
        total = totals.get(p.id, 0)
        tier = resolve_tier(total, tiers)
        rows.append({
            "rank": rank,
            "participant_id": p.id,
            "first_name": p.first_name,
            "last_name": p.last_name,
            "family_id": p.family_id,
            "family_name": families.get(p.family_id, ""),
            "total_points": total,
            "records": record_counts.get(p.id, 0),
            "tier_name": tier.name if tier else UNRANKED,
        })
    return rows


def family_totals(db: Session, *, start: date | None = None, end: date | None = None) -> list[dict]:
    rows = {
        f.id: {"family_id": f.id, "family_name": f.name, "participants": 0, "total_points": 0}
        for f in db.execute(select(Family).order_by(Family.name)).scalars()
    }
    for entry in leaderboard(db, start=start, end=end):
        row = rows[entry["family_id"]]
        row["participants"] += 1
        row["total_points"] += entry["total_points"]
    return sorted(rows.values(), key=lambda r: (-r["total_points"], r["family_name"]))


def activity_totals(db: Session, *, start: date | None = None, end: date | None = None) -> list[dict]:
    times: Counter = Counter()
    points: Counter = Counter()
    for r in list_records(db, start=start, end=end):
        times[r.activity_id] += 1
        points[r.activity_id] += r.points
    rows = [
        {
            "activity_id": a.id,
            "activity_name": a.name,
            "times_recorded": times.get(a.id, 0),
            "total_points": points.get(a.id, 0),
        }
        for a in db.execute(select(Activity)).scalars()
    ]
    return sorted(rows, key=lambda r: (-r["total_points"], r["activity_name"]))


def tier_distribution(db: Session, *, start: date | None = None, end: date | None = None) -> list[dict]:
    """How many participants sit in each tier, lowest tier first, Unranked last."""
    counts = Counter(row["tier_name"] for row in leaderboard(db, start=start, end=end))
    rows = [
        {
            "tier_name": t.name,
            "min_points": t.min_points,
            "max_points": t.max_points,
            "participants": counts.get(t.name, 0),
        }
        for t in list_tiers(db)
    ]
    if counts.get(UNRANKED):
        rows.append({"tier_name": UNRANKED, "participants": counts[UNRANKED]})
    return rows


def dashboard(db: Session, *, recent_limit: int = 10, top_limit: int = 5) -> dict:
    # summed in Python: SQLite SUM raises on 64-bit overflow
    total_points = sum(db.execute(select(ParticipationRecord.points)).scalars())

    recent = []
    for r in list_records(db, limit=recent_limit):
        recent.append({
            "id": r.id,
            "date": r.date,
            "points": r.points,
            "participant_id": r.participant_id,
            "participant_name": r.participant.full_name,
            "activity_id": r.activity_id,
            "activity_name": r.activity.name,
        })

    summary = {
        "families": _count(db, Family),
        "participants": _count(db, Participant),
        "activities": _count(db, Activity),
        "records": _count(db, ParticipationRecord),
        "total_points": total_points,
        "recent": recent,
        "top_participants": leaderboard(db)[:top_limit],
    }
    logger.debug(f"Dashboard summary: {summary['records']} records, {total_points} points")
    return summary
