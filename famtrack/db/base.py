import logging

from ..models.family import Family
from ..models.participant import Participant
from ..models.activity import Activity
from ..models.participation import ParticipationRecord
from ..models.tier import Tier
from ..db.base_class import Base
from .session import engine

logger = logging.getLogger(__name__)


def init_db(bind=None) -> None:
    """Create any missing tables."""
    bind = bind if bind is not None else engine
    Base.metadata.create_all(bind=bind)
    logger.info(f"Database schema ready on {bind.url.render_as_string(hide_password=True)}")
