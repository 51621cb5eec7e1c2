"""Shared pipeline steps for the invitation list use cases.

Each use case loads the list, applies one or more pure transitions, saves
the new list and only then emits the events the transitions produced. Any
problem along the way is wrapped in the use case's own failure type with
the original problem kept as ``cause``.
"""

import logging
from abc import ABC
from typing import ClassVar

from invitations.event_bus import EventBus
from invitations.events import DomainEvent
from invitations.invitation_list.aggregate import InvitationList, ListChange
from invitations.invitation_list.problems import Problem, UseCaseFailure
from invitations.invitation_list.repository.invitation_list_repository import (
    InvitationListRepository,
)
from invitations.result import Failure, Result, Success


class InvitationListUseCase(ABC):
    failure: ClassVar[type[UseCaseFailure]]
    logger: ClassVar[logging.Logger] = logging.getLogger(__name__)

    def __init__(self, repository: InvitationListRepository, event_bus: EventBus) -> None:
        self.repository = repository
        self.event_bus = event_bus

    def _fail(self, step: str, problem: Problem) -> Failure[UseCaseFailure]:
        self.logger.error("%s failed [%s]: %s", step, problem.code.value, problem.message)
        return Failure(self.failure(cause=problem))

    async def _load(self) -> Result[InvitationList, Problem]:
        found = await self.repository.find()
        if found.is_success:
            self.logger.info("invitation list found (version %s)", found.value.version)
        return found

    async def _commit(self, change: ListChange) -> Result[ListChange, Problem]:
        saved = await self.repository.save(change.invitation_list)
        if saved.is_failure:
            return saved
        self.logger.info("invitation list saved")
        self._dispatch(change.events)
        return Success(change)

    def _dispatch(self, events: tuple[DomainEvent, ...]) -> None:
        # The list is already saved, a failing bus must not fail the command
        for event in events:
            try:
                self.event_bus.emit(event.name, event)
            except Exception:
                self.logger.exception("failed to emit %s", event.name)
        if events:
            self.logger.debug("dispatched %d domain event(s)", len(events))
