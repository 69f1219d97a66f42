"""
Case API Entrypoint - Thin API with Command Dispatch
"""
import logging
import datetime
from datetime import date
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import Response
from pydantic import BaseModel, Field, field_validator
from starlette.concurrency import run_in_threadpool

from case import views
from case.domain import commands
from case.domain.domain import CaseNotFound
from case.service_layer import messagebus
from case.service_layer.unit_of_work import SqlAlchemyUnitOfWork
from case.services.csv_import import export_cases_csv, parse_age, template_csv
from staff.entrypoints.staff_api import StaffProfile, current_staff

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1")

CaseStatus = Literal["Suspected", "Confirmed", "Recovered", "Critical"]
FollowUpStatus = Literal["Pending", "In Progress", "Completed"]
Gender = Literal["Male", "Female", "Other"]


def get_uow() -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork()


# ---------- Request/Response models ----------

class FollowUpResponse(BaseModel):
    id: str
    date: datetime.date
    status: str
    remarks: str
    added_by: Optional[str] = None


class CaseResponse(BaseModel):
    id: str
    patient_name: str
    age: int
    gender: str
    address: str
    location: str
    diagnosis_date: Optional[date] = None
    status: str
    contact_number: str
    follow_up_status: str
    follow_up_note: Optional[str] = None
    last_follow_up_date: Optional[date] = None
    history: List[FollowUpResponse] = []


class CasesListResponse(BaseModel):
    cases: List[CaseResponse]
    total_count: int
    is_filtered: bool


class CreateCaseRequest(BaseModel):
    patient_name: str
    age: int = 0
    gender: Gender = "Male"
    address: str = ""
    location: str = ""
    diagnosis_date: date = Field(default_factory=date.today)
    status: CaseStatus = "Suspected"
    contact_number: str = ""

    @field_validator("age", mode="before")
    @classmethod
    def coerce_age(cls, value):
        if isinstance(value, int):
            return value
        return parse_age(str(value))

    model_config = {
        "json_schema_extra": {
            "example": {
                "patient_name": "Rahul Verma",
                "age": 34,
                "gender": "Male",
                "address": "12/B Gandhi Nagar",
                "location": "Central District",
                "diagnosis_date": "2024-10-24",
                "status": "Confirmed",
                "contact_number": "+1 555 0101",
            }
        }
    }


class LogFollowUpRequest(BaseModel):
    status: FollowUpStatus
    remarks: str
    date: datetime.date = Field(default_factory=datetime.date.today)


class LogFollowUpResponse(BaseModel):
    record_id: str
    case: CaseResponse


class ImportResponse(BaseModel):
    imported: int
    case_ids: List[str]


class KpiResponse(BaseModel):
    label: str
    status: str
    value: int
    percent: int


class QuickLinkResponse(BaseModel):
    label: str
    status: str


class DashboardResponse(BaseModel):
    total: int
    kpis: List[KpiResponse]
    quick_links: List[QuickLinkResponse]
    queried_at: str


def _filtered_cases(uow: SqlAlchemyUnitOfWork, status: str, q: str) -> List[CaseResponse]:
    with uow:
        cases = views.filter_cases(uow.cases.list(), status, q)
        return [CaseResponse(**case.to_dict()) for case in cases]


# ---------- Endpoints ----------

@router.get("/dashboard", response_model=DashboardResponse, summary="Case counts by status")
def dashboard(
    staff: StaffProfile = Depends(current_staff),
    uow: SqlAlchemyUnitOfWork = Depends(get_uow),
):
    try:
        return DashboardResponse(**views.get_dashboard(uow))
    except Exception as e:
        logger.error(f"Error building dashboard: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/cases", response_model=CasesListResponse, summary="List cases, optionally filtered")
def list_cases(
    status: str = views.ALL,
    q: str = "",
    staff: StaffProfile = Depends(current_staff),
    uow: SqlAlchemyUnitOfWork = Depends(get_uow),
):
    try:
        cases = _filtered_cases(uow, status, q)
        return CasesListResponse(
            cases=cases,
            total_count=len(cases),
            is_filtered=bool(q) or status != views.ALL,
        )
    except Exception as e:
        logger.error(f"Error listing cases: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/cases/template.csv", summary="Download the CSV import template")
def download_template(staff: StaffProfile = Depends(current_staff)):
    return Response(
        content=template_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="dengue_cases_template.csv"'},
    )


@router.get("/cases/export.csv", summary="Export cases as CSV")
def export_cases(
    status: str = views.ALL,
    q: str = "",
    staff: StaffProfile = Depends(current_staff),
    uow: SqlAlchemyUnitOfWork = Depends(get_uow),
):
    with uow:
        content = export_cases_csv(views.filter_cases(uow.cases.list(), status, q))

    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="dengue_cases.csv"'},
    )


@router.post("/cases/import", response_model=ImportResponse, summary="Import cases from a CSV file")
async def import_cases(
    file: UploadFile = File(...),
    staff: StaffProfile = Depends(current_staff),
    uow: SqlAlchemyUnitOfWork = Depends(get_uow),
):
    raw = await file.read()
    try:
        csv_text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="CSV file must be UTF-8 encoded")

    try:
        [case_ids] = await run_in_threadpool(messagebus.handle, commands.ImportCases(csv_text=csv_text), uow)
        return ImportResponse(imported=len(case_ids), case_ids=case_ids)
    except Exception as e:
        logger.error(f"Error importing cases from {file.filename}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/cases/{case_id}", response_model=CaseResponse, summary="Get case by case_id")
def get_case_by_id(
    case_id: str,
    staff: StaffProfile = Depends(current_staff),
    uow: SqlAlchemyUnitOfWork = Depends(get_uow),
):
    """
    Get a specific case with its follow-up history, newest entry first.
    """
    with uow:
        case = uow.cases.get(case_id)
        if not case:
            raise HTTPException(status_code=404, detail=f"Case with ID {case_id} not found")
        return CaseResponse(**case.to_dict())


@router.post("/cases", response_model=CaseResponse, status_code=201, summary="Create a new case")
def create_case(
    case_request: CreateCaseRequest,
    staff: StaffProfile = Depends(current_staff),
    uow: SqlAlchemyUnitOfWork = Depends(get_uow),
):
    try:
        logger.info(f"Creating new case for patient {case_request.patient_name}")

        [case_id] = messagebus.handle(
            commands.CreateCase(
                patient_name=case_request.patient_name,
                age=case_request.age,
                gender=case_request.gender,
                address=case_request.address,
                location=case_request.location,
                diagnosis_date=case_request.diagnosis_date,
                status=case_request.status,
                contact_number=case_request.contact_number,
            ),
            uow,
        )
        with uow:
            return CaseResponse(**uow.cases.get(case_id).to_dict())

    except ValueError as e:
        logger.error(f"Validation error creating case: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error creating case: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/cases/{case_id}/follow-ups", response_model=LogFollowUpResponse, status_code=201,
             summary="Log a follow-up on a case")
def log_follow_up(
    case_id: str,
    request: LogFollowUpRequest,
    staff: StaffProfile = Depends(current_staff),
    uow: SqlAlchemyUnitOfWork = Depends(get_uow),
):
    try:
        [record_id] = messagebus.handle(
            commands.LogFollowUp(
                case_id=case_id,
                status=request.status,
                remarks=request.remarks,
                date=request.date,
                added_by=staff.name,
            ),
            uow,
        )
        with uow:
            case = uow.cases.get(case_id)
            return LogFollowUpResponse(record_id=record_id, case=CaseResponse(**case.to_dict()))

    except CaseNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error logging follow-up on case {case_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
