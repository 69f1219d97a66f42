"""Message bus for the staff directory service following Cosmic Python pattern."""

from __future__ import annotations
from typing import Callable, Dict, List, Type, Union, TYPE_CHECKING

from shared.domain.commands import Command, Event
from shared.service_layer.messagebus import MessageBus
from staff.domain import commands, events
from staff.service_layer import handlers

if TYPE_CHECKING:
    from staff.service_layer.unit_of_work import AbstractStaffUnitOfWork

Message = Union[
    commands.AddStaffMember,
    commands.RemoveStaffMember,
    commands.ResetStaffPassword,
    commands.ChangePassword,
    commands.Login,
    commands.Logout,
]


# Event handlers - multiple handlers can respond to same event
EVENT_HANDLERS = {
    events.StaffMemberAdded: [handlers.log_staff_member_added],
    events.StaffMemberRemoved: [handlers.end_sessions_of_removed_member],
    events.PasswordChanged: [handlers.log_password_changed],
}  # type: Dict[Type[Event], List[Callable]]

# Command handlers - single handler per command type
COMMAND_HANDLERS = {
    commands.AddStaffMember: handlers.add_staff_member,
    commands.RemoveStaffMember: handlers.remove_staff_member,
    commands.ResetStaffPassword: handlers.reset_staff_password,
    commands.ChangePassword: handlers.change_password,
    commands.Login: handlers.login,
    commands.Logout: handlers.logout,
}  # type: Dict[Type[Command], Callable]

bus = MessageBus(COMMAND_HANDLERS, EVENT_HANDLERS)


def handle(message: Message, uow: AbstractStaffUnitOfWork):
    """Handle message (command or event) with the appropriate handler."""
    return bus.handle(message, uow)
