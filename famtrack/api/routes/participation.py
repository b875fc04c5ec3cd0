from datetime import date
from typing import Optional, List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from ...schemas.participation import ParticipationCreate, ParticipationOut
from ...services.participation_service import (
    record_participation,
    list_records,
    get_record,
    delete_record,
)
from ..deps import get_db

router = APIRouter()


@router.post("/", response_model=ParticipationOut, status_code=201)
def record(payload: ParticipationCreate, db: Session = Depends(get_db)):
    return record_participation(
        db,
        participant_id=payload.participant_id,
        activity_id=payload.activity_id,
        date=payload.date,
        points=payload.points,
    )


@router.get("/", response_model=List[ParticipationOut])
def list_all(
    participant_id: Optional[str] = None,
    activity_id: Optional[str] = None,
    family_id: Optional[str] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
    db: Session = Depends(get_db),
):
    if start and end and start > end:
        raise HTTPException(400, "start must not be after end")
    return list_records(
        db,
        participant_id=participant_id,
        activity_id=activity_id,
        family_id=family_id,
        start=start,
        end=end,
    )


@router.get("/{record_id}", response_model=ParticipationOut)
def get_one(record_id: str, db: Session = Depends(get_db)):
    rec = get_record(db, record_id)
    if not rec:
        raise HTTPException(404, "Participation record not found")
    return rec


# Records are never edited; a wrong entry is deleted and recorded again.
@router.delete("/{record_id}", status_code=204)
def delete(record_id: str, db: Session = Depends(get_db)):
    rec = get_record(db, record_id)
    if not rec:
        raise HTTPException(404, "Participation record not found")
    delete_record(db, rec)
    return Response(status_code=204)
