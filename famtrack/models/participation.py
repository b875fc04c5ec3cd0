import datetime as dt
from sqlalchemy import String, DateTime, Date, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from uuid import uuid4

from .participant import Participant
from .activity import Activity
from ..db.base_class import Base
from . import utcnow


class ParticipationRecord(Base):
    """Audit-style entry: written once, never updated."""

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    participant_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("participant.id", ondelete="RESTRICT"),
        index=True,
        nullable=False,
    )
    activity_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("activity.id", ondelete="RESTRICT"),
        index=True,
        nullable=False,
    )
    date: Mapped[dt.date] = mapped_column(Date, index=True, nullable=False)
    points: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped["DateTime"] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    participant: Mapped["Participant"] = relationship(back_populates="records")
    activity: Mapped["Activity"] = relationship(back_populates="records")
