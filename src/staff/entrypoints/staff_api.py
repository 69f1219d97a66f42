"""
Staff API Entrypoint - Thin API with Command Dispatch

Login/logout, password change and the staff directory.
"""
import asyncio
import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Query
from pydantic import BaseModel, EmailStr
from starlette.concurrency import run_in_threadpool

import config
from staff import views
from staff.adapters.persona_client import GeminiPersonaClient, PersonaClientError
from staff.domain import commands
from staff.domain.domain import InvalidCredentials, NotPermitted, StaffMemberNotFound
from staff.service_layer import messagebus
from staff.service_layer.unit_of_work import SqlAlchemyUnitOfWork

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1")


def get_uow() -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork()


def get_persona_client() -> GeminiPersonaClient:
    return GeminiPersonaClient()


# ---------- Request/Response models ----------

class StaffProfile(BaseModel):
    id: str
    user_id: str
    name: str
    email: str
    phone_number: str
    role: str
    location_type: str
    location_name: str
    created_at: Optional[datetime] = None


class LoginRequest(BaseModel):
    user_id: str      # phone number
    password: str


class LoginResponse(BaseModel):
    token: str
    staff: StaffProfile


class ChangePasswordRequest(BaseModel):
    new_password: str
    confirm_password: str


class MessageResponse(BaseModel):
    message: str


class AddStaffRequest(BaseModel):
    name: str
    email: EmailStr
    phone_number: str
    role: str
    location_type: str = "PHC"
    location_name: str = ""

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Sarah Chen",
                "email": "email@denguepro.org",
                "phone_number": "9876543210",
                "role": "District Entomologist",
                "location_type": "District",
                "location_name": "Central District",
            }
        }
    }


class StaffListResponse(BaseModel):
    staff: List[StaffProfile]
    total_count: int
    is_filtered: bool


class StaffOptionsResponse(BaseModel):
    designations: List[str]
    location_types: List[str]
    location_filters: List[str]


class PersonaResponse(BaseModel):
    role: str


# ---------- Session dependency ----------

def current_staff(
    x_session_token: Optional[str] = Header(default=None),
    uow: SqlAlchemyUnitOfWork = Depends(get_uow),
) -> StaffProfile:
    """Resolve the logged-in staff member from the session token header."""
    if not x_session_token:
        raise HTTPException(status_code=401, detail="Not logged in")

    with uow:
        staff_session = uow.sessions.get(x_session_token)
        member = uow.staff.get(staff_session.staff_id) if staff_session else None
        if not member:
            raise HTTPException(status_code=401, detail="Session expired")
        return StaffProfile(**member.profile())


# ---------- Auth endpoints ----------

@router.post("/auth/login", response_model=LoginResponse, summary="Log in with phone number and password")
async def login(request: LoginRequest, uow: SqlAlchemyUnitOfWork = Depends(get_uow)):
    await asyncio.sleep(config.get_login_delay_seconds())

    try:
        [result] = await run_in_threadpool(
            messagebus.handle, commands.Login(user_id=request.user_id, password=request.password), uow
        )
        return LoginResponse(token=result["token"], staff=StaffProfile(**result["staff"]))
    except InvalidCredentials as e:
        raise HTTPException(status_code=401, detail=str(e))
    except Exception as e:
        logger.error(f"Error logging in user {request.user_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/auth/logout", response_model=MessageResponse, summary="End the current session")
def logout(
    x_session_token: Optional[str] = Header(default=None),
    uow: SqlAlchemyUnitOfWork = Depends(get_uow),
):
    if x_session_token:
        messagebus.handle(commands.Logout(token=x_session_token), uow)
    return MessageResponse(message="Logged out")


@router.get("/auth/me", response_model=StaffProfile, summary="Profile of the logged-in staff member")
def me(staff: StaffProfile = Depends(current_staff)):
    return staff


@router.post("/auth/password", response_model=MessageResponse, summary="Change own password")
def change_password(
    request: ChangePasswordRequest,
    staff: StaffProfile = Depends(current_staff),
    uow: SqlAlchemyUnitOfWork = Depends(get_uow),
):
    try:
        [message] = messagebus.handle(
            commands.ChangePassword(
                staff_id=staff.id,
                new_password=request.new_password,
                confirm_password=request.confirm_password,
            ),
            uow,
        )
        return MessageResponse(message=message)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StaffMemberNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error changing password for {staff.id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


# ---------- Staff directory endpoints ----------

@router.get("/staff/options", response_model=StaffOptionsResponse, summary="Designations and location types")
def staff_options(staff: StaffProfile = Depends(current_staff)):
    return StaffOptionsResponse(**views.get_staff_options())


@router.get("/staff/persona", response_model=PersonaResponse, summary="Suggest a job title for a name")
def suggest_persona(
    name: str = Query(..., min_length=1),
    staff: StaffProfile = Depends(current_staff),
    client: GeminiPersonaClient = Depends(get_persona_client),
):
    try:
        return PersonaResponse(role=client.suggest_role(name))
    except PersonaClientError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/staff", response_model=StaffListResponse, summary="List staff, optionally filtered")
def list_staff(
    q: str = "",
    location_type: str = views.ALL,
    staff: StaffProfile = Depends(current_staff),
    uow: SqlAlchemyUnitOfWork = Depends(get_uow),
):
    try:
        with uow:
            members = views.filter_staff(uow.staff.list(), q, location_type)
            profiles = [StaffProfile(**member.profile()) for member in members]

        return StaffListResponse(
            staff=profiles,
            total_count=len(profiles),
            is_filtered=bool(q) or location_type != views.ALL,
        )
    except Exception as e:
        logger.error(f"Error listing staff: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/staff", response_model=StaffProfile, status_code=201, summary="Add a staff member")
def add_staff(
    request: AddStaffRequest,
    staff: StaffProfile = Depends(current_staff),
    uow: SqlAlchemyUnitOfWork = Depends(get_uow),
):
    try:
        [staff_id] = messagebus.handle(
            commands.AddStaffMember(
                name=request.name,
                email=str(request.email),
                phone_number=request.phone_number,
                role=request.role,
                location_type=request.location_type,
                location_name=request.location_name,
            ),
            uow,
        )
        with uow:
            return StaffProfile(**uow.staff.get(staff_id).profile())
    except ValueError as e:
        logger.error(f"Validation error adding staff member: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error adding staff member: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.delete("/staff/{staff_id}", response_model=MessageResponse, summary="Remove a staff member")
def remove_staff(
    staff_id: str,
    staff: StaffProfile = Depends(current_staff),
    uow: SqlAlchemyUnitOfWork = Depends(get_uow),
):
    try:
        messagebus.handle(commands.RemoveStaffMember(staff_id=staff_id), uow)
        return MessageResponse(message=f"Staff member {staff_id} removed")
    except StaffMemberNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error removing staff member {staff_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/staff/{staff_id}/reset-password", response_model=MessageResponse,
             summary="Reset a member's password to the default")
def reset_password(
    staff_id: str,
    staff: StaffProfile = Depends(current_staff),
    uow: SqlAlchemyUnitOfWork = Depends(get_uow),
):
    try:
        messagebus.handle(commands.ResetStaffPassword(staff_id=staff_id, requested_by=staff.id), uow)
        return MessageResponse(message="User password has been reset to default.")
    except NotPermitted as e:
        raise HTTPException(status_code=403, detail=str(e))
    except StaffMemberNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error resetting password of {staff_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
