import logging
from datetime import date
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.validation import validate_participation_record
from ..models.activity import Activity
from ..models.participant import Participant
from ..models.participation import ParticipationRecord
from .common import save, remove

logger = logging.getLogger(__name__)


def record_participation(
    db: Session, *,
    participant_id: str,
    activity_id: str,
    date: date,
    points: int | None = None,
) -> ParticipationRecord:
    """Store a new participation record.

    When ``points`` is omitted the activity's default weight is awarded.
    Records are never updated after this call.
    """
    participant = db.get(Participant, participant_id) if participant_id else None
    activity = db.get(Activity, activity_id) if activity_id else None
    if points is None and activity is not None:
        points = activity.points

    rec = ParticipationRecord(participant_id=participant_id, activity_id=activity_id, date=date, points=points)
    validate_participation_record(
        rec,
        {participant.id} if participant else set(),
        {activity.id} if activity else set(),
        birth_dates={participant.id: participant.birth_date} if participant else None,
    )
    save(db, rec, action=f"record participation of {participant_id} in {activity_id}")
    logger.info(f"Participation recorded: id={rec.id}, participant_id={participant_id}, activity_id={activity_id}, points={rec.points}")
    return rec


def list_records(
    db: Session, *,
    participant_id: str | None = None,
    activity_id: str | None = None,
    family_id: str | None = None,
    start: date | None = None,
    end: date | None = None,
    limit: int | None = None,
) -> list[ParticipationRecord]:
    """Records matching every given filter, newest first. ``start``/``end`` are inclusive."""
    q = select(ParticipationRecord).order_by(ParticipationRecord.date.desc(), ParticipationRecord.created_at.desc())
    if participant_id is not None:
        q = q.where(ParticipationRecord.participant_id == participant_id)
    if activity_id is not None:
        q = q.where(ParticipationRecord.activity_id == activity_id)
    if family_id is not None:
        q = q.join(Participant, Participant.id == ParticipationRecord.participant_id).where(Participant.family_id == family_id)
    if start is not None:
        q = q.where(ParticipationRecord.date >= start)
    if end is not None:
        q = q.where(ParticipationRecord.date <= end)
    if limit is not None:
        q = q.limit(limit)
    return list(db.execute(q).scalars())


def get_record(db: Session, record_id: str) -> ParticipationRecord | None:
    return db.get(ParticipationRecord, record_id)


def delete_record(db: Session, record: ParticipationRecord) -> None:
    remove(db, record, action=f"delete participation record {record.id}")
    logger.info(f"Participation record deleted: id={record.id}, participant_id={record.participant_id}")
