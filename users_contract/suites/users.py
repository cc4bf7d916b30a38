"""
Users resource contract scenarios

USERS_SCENARIOS is the fixed execution order. Scenarios marked
requires_entity read the user written by create_user.
"""

import logging

from users_contract.core.scenario_runner import Scenario, ScenarioRunner
from users_contract.errors import ContractTestError

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "has already been taken"


async def list_users(runner: ScenarioRunner) -> None:
    response = await runner.client.list_users()
    users = runner.verifier.expect_user_list(response)
    logger.info(f"Listed {len(users)} users")


async def create_user(runner: ScenarioRunner) -> None:
    new_user = runner.data_factory.generate_user()

    response = await runner.client.create_user(new_user)
    created = runner.verifier.expect_user(response, 201)
    runner.state.track(created.id)
    runner.verifier.assert_matches_payload(created, new_user)

    # Store for later scenarios
    runner.state.record_created(created.id)


async def get_user_existing(runner: ScenarioRunner) -> None:
    user_id = runner.state.require_entity()

    response = await runner.client.get_user(user_id)
    user = runner.verifier.expect_user(response, 200)
    runner.verifier.assert_valid_user(user, user_id)


async def get_user_missing(runner: ScenarioRunner) -> None:
    response = await runner.client.get_user(runner.config.missing_user_id)
    runner.verifier.expect_not_found(response)


async def update_user_put_existing(runner: ScenarioRunner) -> None:
    user_id = runner.state.require_entity()
    update = runner.data_factory.generate_user()

    response = await runner.client.update_user_put(user_id, update)
    updated = runner.verifier.expect_user(response, 200)
    runner.verifier.assert_matches_payload(updated, update, user_id)
    runner.state.record_updated()

    # A later read must agree with the PUT response
    read_back = runner.verifier.expect_user(await runner.client.get_user(user_id), 200)
    runner.verifier.assert_matches_payload(read_back, update, user_id)


async def update_user_patch_existing(runner: ScenarioRunner) -> None:
    user_id = runner.state.require_entity()
    update = runner.data_factory.generate_partial_update(["name", "status"])

    response = await runner.client.update_user_patch(user_id, update)
    updated = runner.verifier.expect_user(response, 200)
    runner.verifier.assert_partial_update(updated, update, user_id)
    runner.state.record_updated()


async def update_user_put_missing(runner: ScenarioRunner) -> None:
    update = runner.data_factory.generate_user()
    response = await runner.client.update_user_put(runner.config.missing_user_id, update)
    runner.verifier.expect_not_found(response)


async def update_user_patch_missing(runner: ScenarioRunner) -> None:
    update = runner.data_factory.generate_partial_update(["name"])
    response = await runner.client.update_user_patch(runner.config.missing_user_id, update)
    runner.verifier.expect_not_found(response)


async def create_user_invalid(runner: ScenarioRunner) -> None:
    invalid_user = runner.data_factory.generate_invalid_user()

    response = await runner.client.create_user(invalid_user)
    errors = runner.verifier.expect_validation_errors(response)
    logger.info(f"Invalid user rejected on fields: {', '.join(e.field for e in errors)}")


async def delete_user_existing(runner: ScenarioRunner) -> None:
    user_id = runner.state.require_entity()

    response = await runner.client.delete_user(user_id)
    runner.verifier.expect_no_content(response)
    runner.state.record_deleted()

    # Verify user is deleted
    runner.verifier.expect_status(await runner.client.get_user(user_id), 404)


async def delete_user_missing(runner: ScenarioRunner) -> None:
    response = await runner.client.delete_user(runner.config.missing_user_id)
    runner.verifier.expect_not_found(response)


async def create_user_duplicate_email(runner: ScenarioRunner) -> None:
    first = runner.data_factory.generate_user()
    first_response = await runner.client.create_user(first)
    first_user = runner.verifier.expect_user(first_response, 201)
    runner.state.track(first_user.id)

    try:
        second = runner.data_factory.generate_user(email=first.email)
        response = await runner.client.create_user(second)
        if response.status_code == 201:
            # Accepted by mistake: make sure it is cleaned up too
            runner.state.track(runner.verifier.expect_user(response, 201).id)
        errors = runner.verifier.expect_validation_errors(response)
        runner.verifier.assert_has_error(errors, "email", DUPLICATE_EMAIL_MESSAGE)
    finally:
        try:
            cleanup = await runner.client.delete_user(first_user.id)
        except ContractTestError as e:
            # Left tracked for teardown
            logger.error(f"Cleanup of user {first_user.id} failed: {e}")
        else:
            if cleanup.status_code in (204, 404):
                runner.state.untrack(first_user.id)
            else:
                logger.error(f"Cleanup of user {first_user.id} returned {cleanup.status_code}")


USERS_SCENARIOS = [
    Scenario("list_users", list_users,
             description="GET /users returns 200 and a list of users"),
    Scenario("create_user", create_user,
             description="POST /users returns 201 and echoes the payload"),
    Scenario("get_user_existing", get_user_existing, requires_entity=True,
             description="GET /users/{id} returns the created user"),
    Scenario("get_user_missing", get_user_missing,
             description="GET /users/{missing} returns 404"),
    Scenario("update_user_put_existing", update_user_put_existing, requires_entity=True,
             description="PUT /users/{id} replaces every field"),
    Scenario("update_user_patch_existing", update_user_patch_existing, requires_entity=True,
             description="PATCH /users/{id} changes only name and status"),
    Scenario("update_user_put_missing", update_user_put_missing,
             description="PUT /users/{missing} returns 404"),
    Scenario("update_user_patch_missing", update_user_patch_missing,
             description="PATCH /users/{missing} returns 404"),
    Scenario("create_user_invalid", create_user_invalid,
             description="POST /users with invalid fields returns 422 and an error list"),
    Scenario("delete_user_existing", delete_user_existing, requires_entity=True,
             description="DELETE /users/{id} returns 204 and the user is gone"),
    Scenario("delete_user_missing", delete_user_missing,
             description="DELETE /users/{missing} returns 404"),
    Scenario("create_user_duplicate_email", create_user_duplicate_email,
             description="POST /users with a taken email returns 422 on the email field"),
]
