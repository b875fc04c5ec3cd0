import logging
from datetime import date
from sqlalchemy import select, func
from sqlalchemy.orm import Session

from ..core.errors import ReferenceInUseError
from ..core.validation import validate_family, validate_participant
from ..models.family import Family
from ..models.participant import Participant
from ..models.participation import ParticipationRecord
from .common import apply, candidate, save, remove

logger = logging.getLogger(__name__)

FAMILY_FIELDS = ("name", "contact_email")
PARTICIPANT_FIELDS = ("family_id", "first_name", "last_name", "birth_date")


def _known_family_ids(db: Session, family_id: str | None) -> set[str]:
    if not family_id or db.get(Family, family_id) is None:
        return set()
    return {family_id}


def create_family(db: Session, *, name: str, contact_email: str) -> Family:
    fam = Family(name=name, contact_email=contact_email)
    validate_family(fam)
    save(db, fam, action=f"create family '{name}'")
    logger.info(f"Family created: id={fam.id}, name={fam.name}")
    return fam


def list_families(db: Session) -> list[tuple[Family, int]]:
    """All families with their participant counts, ordered by name."""
    q = (
        select(Family, func.count(Participant.id))
        .outerjoin(Participant, Participant.family_id == Family.id)
        .group_by(Family.id)
        .order_by(Family.name)
    )
    return [(fam, count) for fam, count in db.execute(q).all()]


def get_family(db: Session, family_id: str) -> Family | None:
    return db.get(Family, family_id)


def update_family(db: Session, family: Family, **changes) -> Family:
    validate_family(candidate(family, changes, FAMILY_FIELDS))
    apply(family, changes, FAMILY_FIELDS)
    save(db, family, action=f"update family {family.id}")
    logger.info(f"Family updated: id={family.id}")
    return family


def delete_family(db: Session, family: Family) -> None:
    count = db.execute(
        select(func.count(Participant.id)).where(Participant.family_id == family.id)
    ).scalar_one()
    if count:
        raise ReferenceInUseError("Family", family.id, "participants", count)
    remove(db, family, action=f"delete family {family.id}")
    logger.info(f"Family deleted: id={family.id}")


def add_participant(
    db: Session, *,
    family_id: str,
    first_name: str,
    last_name: str,
    birth_date: date,
) -> Participant:
    p = Participant(family_id=family_id, first_name=first_name, last_name=last_name, birth_date=birth_date)
    validate_participant(p, _known_family_ids(db, family_id), today=date.today())
    save(db, p, action=f"add participant to family {family_id}")
    logger.info(f"Participant created: id={p.id}, family_id={p.family_id}")
    return p


def list_participants(db: Session, *, family_id: str | None = None) -> list[Participant]:
    q = select(Participant).order_by(Participant.last_name, Participant.first_name)
    if family_id is not None:
        q = q.where(Participant.family_id == family_id)
    return list(db.execute(q).scalars())


def get_participant(db: Session, participant_id: str) -> Participant | None:
    return db.get(Participant, participant_id)


def update_participant(db: Session, participant: Participant, **changes) -> Participant:
    proposed = candidate(participant, changes, PARTICIPANT_FIELDS)
    first_record_date = db.execute(
        select(func.min(ParticipationRecord.date)).where(ParticipationRecord.participant_id == participant.id)
    ).scalar_one()
    validate_participant(
        proposed,
        _known_family_ids(db, proposed.family_id),
        today=date.today(),
        first_record_date=first_record_date,
    )
    apply(participant, changes, PARTICIPANT_FIELDS)
    save(db, participant, action=f"update participant {participant.id}")
    logger.info(f"Participant updated: id={participant.id}")
    return participant


def delete_participant(db: Session, participant: Participant) -> None:
    count = db.execute(
        select(func.count(ParticipationRecord.id)).where(ParticipationRecord.participant_id == participant.id)
    ).scalar_one()
    if count:
        raise ReferenceInUseError("Participant", participant.id, "participation records", count)
    remove(db, participant, action=f"delete participant {participant.id}")
    logger.info(f"Participant deleted: id={participant.id}")
