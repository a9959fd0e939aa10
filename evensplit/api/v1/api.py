from fastapi import APIRouter
from evensplit.api.v1.endpoints import participants, settlements

api_router = APIRouter()

api_router.include_router(participants.router, prefix="/participants", tags=["participants"])
api_router.include_router(settlements.router, prefix="/settlements", tags=["settlements"])
