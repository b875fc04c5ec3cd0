import logging
from sqlalchemy import select, func
from sqlalchemy.orm import Session

from ..core.errors import ReferenceInUseError
from ..core.validation import validate_activity
from ..models.activity import Activity
from ..models.participation import ParticipationRecord
from .common import apply, candidate, save, remove

logger = logging.getLogger(__name__)

ACTIVITY_FIELDS = ("name", "description", "points")


def create_activity(db: Session, *, name: str, description: str | None, points: int) -> Activity:
    a = Activity(name=name, description=description, points=points)
    validate_activity(a)
    save(db, a, action=f"create activity '{name}'")
    logger.info(f"Activity created: id={a.id}, name={a.name}, points={a.points}")
    return a


def list_activities(db: Session) -> list[Activity]:
    return list(db.execute(select(Activity).order_by(Activity.name)).scalars())


def get_activity(db: Session, activity_id: str) -> Activity | None:
    return db.get(Activity, activity_id)


def update_activity(db: Session, activity: Activity, **changes) -> Activity:
    # existing records keep the points they were awarded
    validate_activity(candidate(activity, changes, ACTIVITY_FIELDS))
    apply(activity, changes, ACTIVITY_FIELDS)
    save(db, activity, action=f"update activity {activity.id}")
    logger.info(f"Activity updated: id={activity.id}")
    return activity


def delete_activity(db: Session, activity: Activity) -> None:
    count = db.execute(
        select(func.count(ParticipationRecord.id)).where(ParticipationRecord.activity_id == activity.id)
    ).scalar_one()
    if count:
        raise ReferenceInUseError("Activity", activity.id, "participation records", count)
    remove(db, activity, action=f"delete activity {activity.id}")
    logger.info(f"Activity deleted: id={activity.id}")
