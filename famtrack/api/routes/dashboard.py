from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.config import settings
from ...schemas.report import DashboardOut
from ...services.report_service import dashboard
from ..deps import get_db

router = APIRouter()


@router.get("/", response_model=DashboardOut)
def summary(db: Session = Depends(get_db)):
    return dashboard(db, recent_limit=settings.RECENT_LIMIT, top_limit=settings.LEADERBOARD_LIMIT)
