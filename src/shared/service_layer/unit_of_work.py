"""Unit of Work base shared by the staff and case bounded contexts."""

from __future__ import annotations

import abc
from typing import Iterable, Iterator


class AbstractUnitOfWork(abc.ABC):
    """
    One atomic change to the store.

    Leaving the ``with`` block without a commit rolls back. Aggregates loaded
    or added through the repositories are tracked so their domain events can
    be handed to the message bus after the handler returns.
    """

    def __enter__(self) -> AbstractUnitOfWork:
        return self

    def __exit__(self, *args):
        self.rollback()

    def commit(self):
        self._commit()

    def collect_new_events(self) -> Iterator:
        for aggregate in self._seen_aggregates():
            while aggregate.events:
                yield aggregate.events.pop(0)

    def _seen_aggregates(self) -> Iterable:
        return []

    @abc.abstractmethod
    def _commit(self):
        raise NotImplementedError

    @abc.abstractmethod
    def rollback(self):
        raise NotImplementedError
