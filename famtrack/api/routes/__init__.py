from fastapi import APIRouter
from . import families, participants, activities, participation, tiers, dashboard, reports

router = APIRouter()

router.include_router(families.router, prefix="/families", tags=["Families"])
router.include_router(participants.router, prefix="/participants", tags=["Participants"])
router.include_router(activities.router, prefix="/activities", tags=["Activities"])
router.include_router(participation.router, prefix="/participation", tags=["Participation"])
router.include_router(tiers.router, prefix="/tiers", tags=["Tiers"])
router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
router.include_router(reports.router, prefix="/reports", tags=["Reports"])
