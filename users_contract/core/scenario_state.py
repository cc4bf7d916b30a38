"""
Cross-scenario state holder
Tracks the user created by the ordered scenarios and every id awaiting cleanup
"""

import logging
from enum import Enum
from typing import List, Optional

from users_contract.errors import PreconditionError

logger = logging.getLogger(__name__)


class EntityPhase(str, Enum):
    NO_ENTITY = "no_entity"
    ENTITY_EXISTS = "entity_exists"
    ENTITY_DELETED = "entity_deleted"


class ScenarioState:
    """
    Single-slot state shared by one run of the ordered scenarios.

    NO_ENTITY -> ENTITY_EXISTS -> ENTITY_DELETED. Updates keep the phase at
    ENTITY_EXISTS. The id survives deletion but no longer satisfies
    require_entity().
    """

    def __init__(self):
        self.user_id: Optional[int] = None
        self.phase = EntityPhase.NO_ENTITY
        self.updates = 0
        self._tracked: List[int] = []

    def record_created(self, user_id: int) -> None:
        if user_id <= 0:
            raise ValueError(f"User id must be positive, got {user_id}")
        self.user_id = user_id
        self.phase = EntityPhase.ENTITY_EXISTS
        self.updates = 0
        self.track(user_id)
        logger.info(f"Scenario state: user {user_id} exists")

    def record_updated(self) -> None:
        self.require_entity()
        self.updates += 1

    def record_deleted(self) -> None:
        self.require_entity()
        self.phase = EntityPhase.ENTITY_DELETED
        self.untrack(self.user_id)
        logger.info(f"Scenario state: user {self.user_id} deleted")

    def require_entity(self, reason: str = "User must be created first") -> int:
        """Return the live user id or raise PreconditionError"""
        if self.phase is EntityPhase.ENTITY_EXISTS and self.user_id:
            return self.user_id
        if self.phase is EntityPhase.ENTITY_DELETED:
            raise PreconditionError(f"{reason}: user {self.user_id} has already been deleted")
        raise PreconditionError(f"{reason}: no user has been created in this run")

    # Cleanup tracking

    def track(self, user_id: int) -> None:
        if user_id not in self._tracked:
            self._tracked.append(user_id)

    def untrack(self, user_id: Optional[int]) -> None:
        if user_id in self._tracked:
            self._tracked.remove(user_id)

    def tracked_ids(self) -> List[int]:
        return list(self._tracked)
