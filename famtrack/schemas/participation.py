import datetime as dt
from datetime import datetime
from pydantic import BaseModel
from .common import ORMModel
class ParticipationCreate(BaseModel):
    participant_id: str
    activity_id: str
    date: dt.date
    points: int | None = None  # defaults to the activity's points
class ParticipationOut(ORMModel):
    id: str
    participant_id: str
    activity_id: str
    date: dt.date
    points: int
    created_at: datetime
