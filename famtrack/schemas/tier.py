from pydantic import BaseModel
from datetime import datetime
from .common import ORMModel
class TierCreate(BaseModel):
    name: str
    min_points: int
    max_points: int
class TierUpdate(BaseModel):
    name: str | None = None
    min_points: int | None = None
    max_points: int | None = None
class TierOut(ORMModel):
    id: str
    name: str
    min_points: int
    max_points: int
    created_at: datetime
