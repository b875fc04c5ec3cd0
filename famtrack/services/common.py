import logging
from types import SimpleNamespace
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def candidate(obj, changes: dict, fields: tuple[str, ...]) -> SimpleNamespace:
    """Snapshot ``obj`` with ``changes`` applied, without touching the session."""
    values = {f: getattr(obj, f) for f in fields}
    values.update({k: v for k, v in changes.items() if k in fields})
    return SimpleNamespace(**values)


def apply(obj, changes: dict, fields: tuple[str, ...]) -> None:
    for field, value in changes.items():
        if field in fields:
            setattr(obj, field, value)


def save(db: Session, obj, *, action: str):
    try:
        db.add(obj)
        db.commit()
        db.refresh(obj)
    except Exception as e:
        logger.error(f"Error while trying to {action}: {str(e)}", exc_info=True)
        db.rollback()
        raise
    return obj


def remove(db: Session, obj, *, action: str) -> None:
    try:
        db.delete(obj)
        db.commit()
    except Exception as e:
        logger.error(f"Error while trying to {action}: {str(e)}", exc_info=True)
        db.rollback()
        raise
