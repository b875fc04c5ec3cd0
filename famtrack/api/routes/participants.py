from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from ...schemas.participant import ParticipantOut, ParticipantUpdate, StandingOut
from ...schemas.participation import ParticipationOut
from ...services.family_service import get_participant, list_participants, update_participant, delete_participant
from ...services.participation_service import list_records
from ...services.tier_service import standing_for
from ..deps import get_db

router = APIRouter()


def _load(db: Session, participant_id: str):
    p = get_participant(db, participant_id)
    if not p:
        raise HTTPException(404, "Participant not found")
    return p


@router.get("/", response_model=list[ParticipantOut])
def list_all(db: Session = Depends(get_db)):
    return list_participants(db)

@router.get("/{participant_id}", response_model=ParticipantOut)
def get_one(participant_id: str, db: Session = Depends(get_db)):
    return _load(db, participant_id)

@router.patch("/{participant_id}", response_model=ParticipantOut)
def edit(participant_id: str, payload: ParticipantUpdate, db: Session = Depends(get_db)):
    p = _load(db, participant_id)
    return update_participant(db, p, **payload.model_dump(exclude_unset=True))

@router.delete("/{participant_id}", status_code=204)
def delete(participant_id: str, db: Session = Depends(get_db)):
    delete_participant(db, _load(db, participant_id))
    return Response(status_code=204)

@router.get("/{participant_id}/records", response_model=list[ParticipationOut])
def history(participant_id: str, db: Session = Depends(get_db)):
    p = _load(db, participant_id)
    return list_records(db, participant_id=p.id)

@router.get("/{participant_id}/standing", response_model=StandingOut)
def standing(participant_id: str, db: Session = Depends(get_db)):
    return standing_for(db, _load(db, participant_id))
