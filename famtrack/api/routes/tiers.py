from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from ...schemas.tier import TierCreate, TierUpdate, TierOut
from ...services.tier_service import list_tiers, get_tier, create_tier, update_tier, delete_tier
from ..deps import get_db

router = APIRouter()


def _load(db: Session, tier_id: str):
    t = get_tier(db, tier_id)
    if not t:
        raise HTTPException(404, "Tier not found")
    return t


@router.get("/", response_model=list[TierOut])
def list_all(db: Session = Depends(get_db)):
    return list_tiers(db)

@router.post("/", response_model=TierOut, status_code=201)
def create(payload: TierCreate, db: Session = Depends(get_db)):
    return create_tier(db, name=payload.name, min_points=payload.min_points, max_points=payload.max_points)

@router.patch("/{tier_id}", response_model=TierOut)
def edit(tier_id: str, payload: TierUpdate, db: Session = Depends(get_db)):
    t = _load(db, tier_id)
    return update_tier(db, t, **payload.model_dump(exclude_unset=True))

@router.delete("/{tier_id}", status_code=204)
def delete(tier_id: str, db: Session = Depends(get_db)):
    delete_tier(db, _load(db, tier_id))
    return Response(status_code=204)
