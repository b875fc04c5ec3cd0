from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from ...schemas.family import FamilyCreate, FamilyUpdate, FamilyOut, FamilyDetail
from ...schemas.participant import ParticipantCreate, ParticipantOut
from ...services.family_service import (
    create_family,
    list_families,
    get_family,
    update_family,
    delete_family,
    add_participant,
    list_participants,
)
from ..deps import get_db
router = APIRouter()


def _load(db: Session, family_id: str):
    fam = get_family(db, family_id)
    if not fam:
        raise HTTPException(404, "Family not found")
    return fam


@router.post("/", response_model=FamilyOut, status_code=201)
def create(payload: FamilyCreate, db: Session = Depends(get_db)):
    return create_family(db, name=payload.name, contact_email=payload.contact_email)

@router.get("/", response_model=list[FamilyOut])
def list_all(db: Session = Depends(get_db)):
    out = []
    for fam, count in list_families(db):
        item = FamilyOut.model_validate(fam)
        item.participant_count = count
        out.append(item)
    return out

@router.get("/{family_id}", response_model=FamilyDetail)
def get_one(family_id: str, db: Session = Depends(get_db)):
    fam = _load(db, family_id)
    participants = list_participants(db, family_id=fam.id)
    return FamilyDetail(
        id=fam.id,
        name=fam.name,
        contact_email=fam.contact_email,
        created_at=fam.created_at,
        participant_count=len(participants),
        participants=[ParticipantOut.model_validate(p) for p in participants],
    )

@router.patch("/{family_id}", response_model=FamilyOut)
def edit(family_id: str, payload: FamilyUpdate, db: Session = Depends(get_db)):
    fam = _load(db, family_id)
    return update_family(db, fam, **payload.model_dump(exclude_unset=True))

@router.delete("/{family_id}", status_code=204)
def delete(family_id: str, db: Session = Depends(get_db)):
    delete_family(db, _load(db, family_id))
    return Response(status_code=204)

# roster
@router.get("/{family_id}/participants", response_model=list[ParticipantOut])
def roster(family_id: str, db: Session = Depends(get_db)):
    fam = _load(db, family_id)
    return list_participants(db, family_id=fam.id)

@router.post("/{family_id}/participants", response_model=ParticipantOut, status_code=201)
def add_member(family_id: str, payload: ParticipantCreate, db: Session = Depends(get_db)):
    # an unknown family surfaces as a foreign key error on family_id
    return add_participant(
        db,
        family_id=family_id,
        first_name=payload.first_name,
        last_name=payload.last_name,
        birth_date=payload.birth_date,
    )
