from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status

from evensplit.db.session import get_ledger
from evensplit.schemas.participant import ContributionCreate, ParticipantCreate, ParticipantResponse
from evensplit.services.ledger_service import Ledger

router = APIRouter()

@router.get("/", response_model=List[ParticipantResponse])
async def list_participants(ledger: Ledger = Depends(get_ledger)):
    """List participants in the order they were added"""
    return list(ledger.participants)

@router.post("/", response_model=ParticipantResponse, status_code=status.HTTP_201_CREATED)
async def add_participant(participant_in: ParticipantCreate, ledger: Ledger = Depends(get_ledger)):
    participant_id = ledger.add_participant(participant_in.name)
    return ledger.get_participant(participant_id)

@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
async def reset_participants(ledger: Ledger = Depends(get_ledger)):
    """Remove everyone"""
    ledger.reset_all()
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{participant_id}", response_model=ParticipantResponse)
async def get_participant(participant_id: str, ledger: Ledger = Depends(get_ledger)):
    participant = ledger.get_participant(participant_id)
    if not participant:
        raise HTTPException(status_code=404, detail="Participant not found")
    return participant

@router.delete("/{participant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_participant(participant_id: str, ledger: Ledger = Depends(get_ledger)):
    """Remove a participant; unknown ids are ignored and still return 204"""
    ledger.remove_participant(participant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post("/{participant_id}/contributions", response_model=ParticipantResponse)
async def record_contribution(
    participant_id: str,
    contribution_in: ContributionCreate,
    ledger: Ledger = Depends(get_ledger)
):
    """
    Record a payment made by a participant.

    Unlike DELETE, an unknown id is a 404 here: there is no participant to
    return. The ledger itself ignores the call. Invalid amounts are rejected
    with 422 by the request schema.
    """
    if not ledger.get_participant(participant_id):
        raise HTTPException(status_code=404, detail="Participant not found")

    ledger.record_contribution(participant_id, contribution_in.amount)

    return ledger.get_participant(participant_id)
