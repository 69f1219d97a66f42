"""Message bus for case_mgmt service following Cosmic Python pattern."""

from __future__ import annotations
from typing import Callable, Dict, List, Type, Union, TYPE_CHECKING

from shared.domain.commands import Command, Event
from shared.service_layer.messagebus import MessageBus
from case.domain import commands, events
from case.service_layer import handlers

if TYPE_CHECKING:
    from case.service_layer.unit_of_work import AbstractCaseUnitOfWork

Message = Union[commands.CreateCase, commands.LogFollowUp, commands.ImportCases]


# Event handlers - multiple handlers can respond to same event
EVENT_HANDLERS = {
    events.CaseCreated: [handlers.log_case_created],
    events.FollowUpLogged: [handlers.log_follow_up_logged],
}  # type: Dict[Type[Event], List[Callable]]

# Command handlers - single handler per command type
COMMAND_HANDLERS = {
    commands.CreateCase: handlers.create_case,
    commands.LogFollowUp: handlers.log_follow_up,
    commands.ImportCases: handlers.import_cases,
}  # type: Dict[Type[Command], Callable]

bus = MessageBus(COMMAND_HANDLERS, EVENT_HANDLERS)


def handle(message: Message, uow: AbstractCaseUnitOfWork):
    """Handle message (command or event) with the appropriate handler."""
    return bus.handle(message, uow)
