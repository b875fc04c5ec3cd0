from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from ...schemas.activity import ActivityCreate, ActivityUpdate, ActivityOut
from ...services.activity_service import (
    create_activity,
    list_activities,
    get_activity,
    update_activity,
    delete_activity,
)
from ..deps import get_db

router = APIRouter()


def _load(db: Session, activity_id: str):
    a = get_activity(db, activity_id)
    if not a:
        raise HTTPException(404, "Activity not found")
    return a


@router.post("/", response_model=ActivityOut, status_code=201)
def create(payload: ActivityCreate, db: Session = Depends(get_db)):
    return create_activity(db, name=payload.name, description=payload.description, points=payload.points)

@router.get("/", response_model=list[ActivityOut])
def catalog(db: Session = Depends(get_db)):
    return list_activities(db)

@router.get("/{activity_id}", response_model=ActivityOut)
def get_one(activity_id: str, db: Session = Depends(get_db)):
    return _load(db, activity_id)

@router.patch("/{activity_id}", response_model=ActivityOut)
def edit(activity_id: str, payload: ActivityUpdate, db: Session = Depends(get_db)):
    a = _load(db, activity_id)
    return update_activity(db, a, **payload.model_dump(exclude_unset=True))

@router.delete("/{activity_id}", status_code=204)
def delete(activity_id: str, db: Session = Depends(get_db)):
    delete_activity(db, _load(db, activity_id))
    return Response(status_code=204)
