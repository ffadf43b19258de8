"""Dashboard cards for the back-office home page."""
from fastapi import APIRouter, Depends

from pharmacare.api.deps import get_store
from pharmacare.db.store import EntityStore
from pharmacare.schemas.dashboard import DashboardStats
from pharmacare.services import dashboard_service

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(store: EntityStore = Depends(get_store)):
    """
    Returns: medication count, today's orders and revenue, low-stock count,
    plus placeholder growth figures.
    """
    return dashboard_service.get_dashboard_stats(store)
