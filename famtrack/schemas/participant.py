from datetime import date, datetime
from pydantic import BaseModel
from .common import ORMModel
from .tier import TierOut
class ParticipantCreate(BaseModel):
    first_name: str
    last_name: str
    birth_date: date
class ParticipantUpdate(BaseModel):
    family_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    birth_date: date | None = None
class ParticipantOut(ORMModel):
    id: str
    family_id: str
    first_name: str
    last_name: str
    birth_date: date
    created_at: datetime
class StandingOut(BaseModel):
    participant_id: str
    total_points: int
    tier: TierOut | None = None
    tier_name: str                      # tier name, or "Unranked"
    next_tier: TierOut | None = None
    points_to_next: int | None = None
