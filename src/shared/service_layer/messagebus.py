# pylint: disable=broad-except
"""Message bus for routing commands and events to handlers (Cosmic Python pattern)."""

from __future__ import annotations
import logging
from typing import Callable, Dict, List, Type, TYPE_CHECKING

from shared.domain.commands import Command, Event

if TYPE_CHECKING:
    from shared.service_layer.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


class MessageBus:
    """Routes a command to its single handler and events to all of theirs."""

    def __init__(
        self,
        command_handlers: Dict[Type[Command], Callable],
        event_handlers: Dict[Type[Event], List[Callable]],
    ):
        self.command_handlers = command_handlers
        self.event_handlers = event_handlers

    def handle(self, message, uow: AbstractUnitOfWork) -> list:
        """Handle message (command or event) with the appropriate handler."""
        results = []
        queue = [message]

        while queue:
            message = queue.pop(0)

            if isinstance(message, Event):
                self.handle_event(message, queue, uow)
            elif isinstance(message, Command):
                cmd_result = self.handle_command(message, queue, uow)
                results.append(cmd_result)
            else:
                raise Exception(f"{message} was not an Event or Command")

        return results

    def handle_event(self, event: Event, queue: list, uow: AbstractUnitOfWork):
        """Handle event by calling all registered event handlers."""
        for handler in self.event_handlers.get(type(event), []):
            try:
                logger.debug(f"handling event {event} with handler {handler.__name__}")
                handler(event, uow=uow)
                queue.extend(uow.collect_new_events())
            except Exception:
                logger.exception("Exception handling event %s", event)
                continue

    def handle_command(self, command: Command, queue: list, uow: AbstractUnitOfWork):
        """Handle command by calling the registered command handler."""
        logger.debug(f"handling command {command}")
        try:
            handler = self.command_handlers[type(command)]
            result = handler(command, uow=uow)
            queue.extend(uow.collect_new_events())
            return result
        except Exception:
            logger.exception("Exception handling command %s", command)
            raise
