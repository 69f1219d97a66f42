import logging
from typing import Any, Dict

import config
from staff.domain import commands, events
from staff.domain.domain import (
    StaffMember,
    StaffSession,
    InvalidCredentials,
    StaffMemberNotFound,
)
from staff.service_layer.unit_of_work import AbstractStaffUnitOfWork

logger = logging.getLogger(__name__)


def add_staff_member(command: commands.AddStaffMember, uow: AbstractStaffUnitOfWork) -> str:
    """
    Add a member to the staff directory.

    The phone number becomes the login user id and the member starts with
    the default password.

    Returns:
        staff_id of the new member
    """
    logger.info(f"Processing AddStaffMember command for {command.name}")

    with uow:
        member = StaffMember.register(
            name=command.name,
            email=command.email,
            phone_number=command.phone_number,
            role=command.role,
            location_type=command.location_type,
            location_name=command.location_name,
            password=config.get_default_password(),
        )
        staff_id = uow.staff.add(member)
        uow.commit()

    logger.info(f"Added staff member {staff_id}")
    return staff_id


def remove_staff_member(command: commands.RemoveStaffMember, uow: AbstractStaffUnitOfWork) -> str:
    with uow:
        member = uow.staff.get(command.staff_id)
        if not member:
            raise StaffMemberNotFound(f"Staff member {command.staff_id} not found")
        uow.staff.remove(member)
        uow.commit()

    logger.info(f"Removed staff member {command.staff_id}")
    return command.staff_id


def reset_staff_password(command: commands.ResetStaffPassword, uow: AbstractStaffUnitOfWork) -> str:
    """Set a member's password back to the default; requester's role must allow it."""
    with uow:
        requester = uow.staff.get(command.requested_by)
        if not requester:
            raise StaffMemberNotFound(f"Staff member {command.requested_by} not found")

        member = uow.staff.get(command.staff_id)
        if not member:
            raise StaffMemberNotFound(f"Staff member {command.staff_id} not found")

        member.reset_password(requester, config.get_default_password())
        uow.commit()

    logger.info(f"Password of staff member {command.staff_id} reset by {command.requested_by}")
    return command.staff_id


def change_password(command: commands.ChangePassword, uow: AbstractStaffUnitOfWork) -> str:
    with uow:
        member = uow.staff.get(command.staff_id)
        if not member:
            raise StaffMemberNotFound(f"Staff member {command.staff_id} not found")

        member.change_password(command.new_password, command.confirm_password)
        uow.commit()

    return "Password updated successfully."


def login(command: commands.Login, uow: AbstractStaffUnitOfWork) -> Dict[str, Any]:
    """
    Open a session for the member whose user id and password both match.

    Returns:
        dict with the session token and the member's profile

    Raises:
        InvalidCredentials: If no member matches
    """
    with uow:
        member = uow.staff.get_by_credentials(command.user_id, command.password)
        if not member:
            logger.info(f"Failed login for user id {command.user_id}")
            raise InvalidCredentials("Invalid Phone Number or Password")

        staff_session = StaffSession.open(member.id)
        token = uow.sessions.add(staff_session)
        uow.commit()

        logger.info(f"Staff member {member.id} logged in")
        return {"token": token, "staff": member.profile()}


def logout(command: commands.Logout, uow: AbstractStaffUnitOfWork) -> bool:
    with uow:
        ended = uow.sessions.delete(command.token)
        uow.commit()
    return ended


def end_sessions_of_removed_member(event: events.StaffMemberRemoved, uow: AbstractStaffUnitOfWork):
    """A removed member cannot stay logged in."""
    with uow:
        count = uow.sessions.delete_for_staff(event.staff_id)
        uow.commit()
    logger.info(f"Ended {count} session(s) of removed staff member {event.staff_id}")


def log_staff_member_added(event: events.StaffMemberAdded, uow: AbstractStaffUnitOfWork):
    logger.info(f"Staff member {event.staff_id} ({event.name}) joined the directory")


def log_password_changed(event: events.PasswordChanged, uow: AbstractStaffUnitOfWork):
    if event.reset:
        logger.info(f"Password of staff member {event.staff_id} was reset to the default")
    else:
        logger.info(f"Staff member {event.staff_id} changed their password")
