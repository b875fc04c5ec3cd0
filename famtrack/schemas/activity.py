from pydantic import BaseModel
from datetime import datetime
from .common import ORMModel
class ActivityCreate(BaseModel):
    name: str
    description: str | None = None
    points: int = 0
class ActivityUpdate(BaseModel):
    name: str | None = None
    description: str | None = None
    points: int | None = None
class ActivityOut(ORMModel):
    id: str
    name: str
    description: str | None = None
    points: int
    created_at: datetime
