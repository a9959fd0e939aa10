from typing import List
from fastapi import APIRouter, Depends

from evensplit.db.session import get_ledger
from evensplit.models.settlement import Transfer
from evensplit.schemas.settlement import SummaryResponse
from evensplit.services.ledger_service import Ledger
from evensplit.services.settlement_service import SettlementService

router = APIRouter()

@router.get("/", response_model=List[Transfer])
async def list_settlements(ledger: Ledger = Depends(get_ledger)):
    """Transfers that settle everyone against the equal split"""
    return SettlementService.calculate_settlements(ledger.participants)

@router.get("/summary", response_model=SummaryResponse)
async def get_summary(ledger: Ledger = Depends(get_ledger)):
    return SettlementService.summarize(ledger)
