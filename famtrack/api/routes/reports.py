from datetime import date
from typing import Optional, List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ...schemas.report import LeaderboardRow, FamilyTotal, ActivityTotal, TierCount
from ...services.report_service import leaderboard, family_totals, activity_totals, tier_distribution
from ..deps import get_db

router = APIRouter()


def date_range(start: Optional[date] = None, end: Optional[date] = None) -> dict:
    """Inclusive date range shared by every report."""
    if start and end and start > end:
        raise HTTPException(400, "start must not be after end")
    return {"start": start, "end": end}


@router.get("/leaderboard", response_model=List[LeaderboardRow])
def get_leaderboard(period: dict = Depends(date_range), db: Session = Depends(get_db)):
    return leaderboard(db, **period)

@router.get("/families", response_model=List[FamilyTotal])
def get_family_totals(period: dict = Depends(date_range), db: Session = Depends(get_db)):
    return family_totals(db, **period)

@router.get("/activities", response_model=List[ActivityTotal])
def get_activity_totals(period: dict = Depends(date_range), db: Session = Depends(get_db)):
    return activity_totals(db, **period)

@router.get("/tiers", response_model=List[TierCount])
def get_tier_distribution(period: dict = Depends(date_range), db: Session = Depends(get_db)):
    return tier_distribution(db, **period)
