"""Dashboard controller."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from config.database import get_db
from schemas.dashboard_schema import DashboardStatsSchema
from services.dashboard_service import DashboardService


class DashboardController:
    def __init__(self):
        self.router = APIRouter(tags=["Dashboard"])

        @self.router.get("/", response_model=DashboardStatsSchema, status_code=status.HTTP_200_OK)
        async def get_dashboard_stats(db: Session = Depends(get_db)):
            """Counts, top clients and recent orders in one read-only snapshot."""
            return DashboardService(db).get_dashboard_stats()
