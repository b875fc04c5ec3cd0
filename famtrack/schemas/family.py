from datetime import datetime
from typing import List
from pydantic import BaseModel, EmailStr
from .common import ORMModel
from .participant import ParticipantOut
class FamilyCreate(BaseModel):
    name: str
    contact_email: EmailStr
class FamilyUpdate(BaseModel):
    name: str | None = None
    contact_email: EmailStr | None = None
class FamilyOut(ORMModel):
    id: str
    name: str
    contact_email: str
    created_at: datetime
    participant_count: int = 0
class FamilyDetail(FamilyOut):
    participants: List[ParticipantOut] = []
