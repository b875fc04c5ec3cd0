import datetime as dt
from typing import List
from pydantic import BaseModel


class LeaderboardRow(BaseModel):
    rank: int
    participant_id: str
    first_name: str
    last_name: str
    family_id: str
    family_name: str
    total_points: int
    records: int
    tier_name: str


class FamilyTotal(BaseModel):
    family_id: str
    family_name: str
    participants: int
    total_points: int


class ActivityTotal(BaseModel):
    activity_id: str
    activity_name: str
    times_recorded: int
    total_points: int


class TierCount(BaseModel):
    tier_name: str
    min_points: int | None = None
    max_points: int | None = None
    participants: int


class RecentRecord(BaseModel):
    id: str
    date: dt.date
    points: int
    participant_id: str
    participant_name: str
    activity_id: str
    activity_name: str


class DashboardOut(BaseModel):
    families: int
    participants: int
    activities: int
    records: int
    total_points: int
    recent: List[RecentRecord] = []
    top_participants: List[LeaderboardRow] = []
