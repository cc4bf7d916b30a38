"""
ScenarioState transitions and precondition checks
"""

import pytest

from users_contract.core.scenario_state import EntityPhase, ScenarioState
from users_contract.errors import PreconditionError


def test_starts_without_entity():
    state = ScenarioState()

    assert state.phase is EntityPhase.NO_ENTITY
    with pytest.raises(PreconditionError, match="no user has been created"):
        state.require_entity()


def test_create_update_delete_lifecycle():
    state = ScenarioState()

    state.record_created(10)
    assert state.require_entity() == 10
    assert state.tracked_ids() == [10]

    state.record_updated()
    state.record_updated()
    assert state.phase is EntityPhase.ENTITY_EXISTS
    assert state.updates == 2

    state.record_deleted()
    assert state.phase is EntityPhase.ENTITY_DELETED
    assert state.user_id == 10
    assert state.tracked_ids() == []


def test_deleted_entity_fails_precondition():
    state = ScenarioState()
    state.record_created(10)
    state.record_deleted()

    with pytest.raises(PreconditionError, match="already been deleted"):
        state.require_entity()
    with pytest.raises(PreconditionError):
        state.record_updated()


def test_rejects_non_positive_id():
    with pytest.raises(ValueError):
        ScenarioState().record_created(0)


def test_tracking_is_idempotent():
    state = ScenarioState()
    state.track(5)
    state.track(5)
    state.untrack(6)

    assert state.tracked_ids() == [5]
