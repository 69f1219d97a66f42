"""
Dengue Pro API - application wiring.

Mounts the staff and case routers, serves the health check and the date
picker's month grid, and prepares the database on startup.
"""
import logging
import os
from datetime import date, datetime, timezone
from typing import List, Optional, Tuple

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

import config
from shared.adapters import database
from shared.services import calendar_grid
from staff.adapters import orm as staff_orm
from staff.entrypoints import staff_api
from staff.entrypoints.staff_api import StaffProfile, current_staff
from staff.service_layer import seed as staff_seed
from staff.service_layer.unit_of_work import SqlAlchemyUnitOfWork as StaffUnitOfWork
from case.adapters import orm as case_orm
from case.entrypoints import case_api
from case.service_layer import seed as case_seed
from case.service_layer.unit_of_work import SqlAlchemyUnitOfWork as CaseUnitOfWork

log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
logging.basicConfig(
    level=getattr(logging, log_level),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Dengue Pro API",
    description="Staff directory, case reports and follow-up tracking for dengue surveillance",
    version="1.0.0"
)

app.include_router(staff_api.router)
app.include_router(case_api.router)


# Initialize database and ORM mappers (Cosmic Python pattern)
@app.on_event("startup")
async def startup_event():
    staff_orm.metadata.create_all(database.engine)
    case_orm.metadata.create_all(database.engine)
    staff_orm.start_mappers()
    case_orm.start_mappers()
    logger.info("✓ Dengue Pro databases initialized")

    if config.seed_sample_data():
        staff_seed.seed_staff_directory(StaffUnitOfWork())
        case_seed.seed_cases(CaseUnitOfWork())


# ---------- Response models ----------

class DayCellResponse(BaseModel):
    day: int
    iso_date: str
    is_today: bool
    is_selected: bool


class MonthGridResponse(BaseModel):
    year: int
    month: int
    month_name: str
    leading_blanks: int
    days: List[DayCellResponse]
    previous_month: Tuple[int, int]
    next_month: Tuple[int, int]
    today: str


# ---------- Endpoints ----------

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "dengue-pro-api",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@app.get("/api/v1/calendar", response_model=MonthGridResponse, summary="Month grid for the date picker")
def calendar_month(
    year: Optional[int] = None,
    month: Optional[int] = None,
    selected: Optional[str] = None,
    staff: StaffProfile = Depends(current_staff),
):
    """
    Month grid for the date picker.

    Without year/month the grid shows the selected date's month, or the
    current month when nothing is selected.
    """
    today = date.today()
    try:
        selected_day = calendar_grid.parse_day(selected)
        anchor = selected_day or today
        grid = calendar_grid.month_grid(
            year if year is not None else anchor.year,
            month if month is not None else anchor.month,
            selected=selected_day,
            today=today,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return MonthGridResponse(
        year=grid.year,
        month=grid.month,
        month_name=grid.month_name,
        leading_blanks=grid.leading_blanks,
        days=[DayCellResponse(**vars(cell)) for cell in grid.days],
        previous_month=grid.previous_month,
        next_month=grid.next_month,
        today=today.isoformat(),
    )


def main():
    import uvicorn

    uvicorn.run(
        "shared.entrypoints.app:app",
        host=os.getenv("API_BIND", "0.0.0.0"),
        port=int(os.getenv("API_PORT", "8000")),
    )
