"""
Response verification for the Users contract
Decodes raw envelopes into typed shapes and asserts status and field expectations
"""

import logging
from typing import Any, List, Mapping, Optional

from pydantic import TypeAdapter, ValidationError

from users_contract.core.rest_client import ApiResponse
from users_contract.errors import DecodeError, UnexpectedStatusError, VerificationError
from users_contract.models import (
    DecodeResult,
    ErrorEntry,
    Gender,
    UserCreateRequest,
    UserResponse,
    UserStatus,
    USER_FIELDS,
)

logger = logging.getLogger(__name__)

# The API words its not-found message differently per operation
NOT_FOUND_PHRASES = ("resource not found", "not found")

GENDERS = tuple(g.value for g in Gender)
STATUSES = tuple(s.value for s in UserStatus)


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", None) or str(shape).replace("typing.", "")


def _as_dict(payload: Any) -> Mapping[str, Any]:
    if isinstance(payload, UserCreateRequest):
        return payload.model_dump()
    return payload


class ResponseVerifier:
    """Status, shape and field-level assertions over ApiResponse envelopes"""

    def expect_status(self, response: ApiResponse, expected: int) -> None:
        if response.status_code != expected:
            logger.warning(
                f"{response.method} {response.url} returned {response.status_code}, "
                f"expected {expected}. Response: {response.text}"
            )
            raise UnexpectedStatusError(
                expected, response.status_code, response.text,
                context=f"{response.method} {response.url}",
            )

    def decode(self, response: ApiResponse, shape: Any) -> DecodeResult:
        """Decode the body into `shape` (a model class or List[Model]) without raising"""
        try:
            value = TypeAdapter(shape).validate_json(response.text)
        except ValidationError as e:
            return DecodeResult.failure(str(e), raw=response.text)
        return DecodeResult.ok(value, raw=response.text)

    def _decode_or_fail(self, response: ApiResponse, shape: Any) -> Any:
        result = self.decode(response, shape)
        if not result.success:
            raise DecodeError(_shape_name(shape), response.text, result.error)
        if result.value is None:
            raise DecodeError(_shape_name(shape), response.text, "decoded to null")
        return result.value

    # Success responses

    def expect_user(self, response: ApiResponse, expected_status: int = 200) -> UserResponse:
        self.expect_status(response, expected_status)
        return self._decode_or_fail(response, UserResponse)

    def expect_user_list(self, response: ApiResponse, expected_status: int = 200) -> List[UserResponse]:
        self.expect_status(response, expected_status)
        return self._decode_or_fail(response, List[UserResponse])

    def expect_no_content(self, response: ApiResponse) -> None:
        self.expect_status(response, 204)
        if not response.is_empty:
            raise VerificationError("Expected an empty body", expected="", actual=response.text)

    def assert_matches_payload(self, user: UserResponse, payload: Any, user_id: Optional[int] = None) -> None:
        """Every field sent must come back unchanged"""
        if user_id is not None:
            self._assert_equal("id", user_id, user.id)
        for field, expected in _as_dict(payload).items():
            self._assert_equal(field, expected, getattr(user, field))

    def assert_valid_user(self, user: UserResponse, user_id: Optional[int] = None) -> None:
        """Checks for reads where exact values are not known in advance"""
        if user_id is not None:
            self._assert_equal("id", user_id, user.id)
        self._assert_not_empty(user, "name")
        self._assert_not_empty(user, "email")
        self._assert_member("gender", user.gender, GENDERS)
        self._assert_member("status", user.status, STATUSES)

    def assert_partial_update(self, user: UserResponse, update: Mapping[str, Any],
                              user_id: Optional[int] = None) -> None:
        """Updated fields equal the update; the rest are only checked for non-emptiness"""
        if user_id is not None:
            self._assert_equal("id", user_id, user.id)
        for field, expected in update.items():
            self._assert_equal(field, expected, getattr(user, field))
        for field in USER_FIELDS:
            if field not in update:
                self._assert_not_empty(user, field)

    # Error responses

    def expect_not_found(self, response: ApiResponse) -> None:
        self.expect_status(response, 404)
        if response.is_empty:
            raise VerificationError("Not-found response has an empty body")
        body = response.text.lower()
        if not any(phrase in body for phrase in NOT_FOUND_PHRASES):
            raise VerificationError(
                "Response should contain 'not found' or 'resource not found'",
                expected=" | ".join(NOT_FOUND_PHRASES),
                actual=response.text,
            )

    def expect_validation_errors(self, response: ApiResponse) -> List[ErrorEntry]:
        self.expect_status(response, 422)
        errors = self._decode_or_fail(response, List[ErrorEntry])
        if not errors:
            raise VerificationError("Expected at least one validation error", actual=response.text)
        return errors

    def assert_has_error(self, errors: List[ErrorEntry], field: str, fragment: str) -> ErrorEntry:
        for entry in errors:
            if entry.field == field and fragment in entry.message:
                return entry
        raise VerificationError(
            f"No error on field {field!r} containing {fragment!r}",
            expected=f"{field}: ...{fragment}...",
            actual=[e.model_dump() for e in errors],
        )

    # Helpers

    @staticmethod
    def _assert_equal(field: str, expected: Any, actual: Any) -> None:
        if expected != actual:
            raise VerificationError(f"Field {field!r} mismatch", expected=expected, actual=actual)

    @staticmethod
    def _assert_not_empty(user: UserResponse, field: str) -> None:
        if not getattr(user, field):
            raise VerificationError(f"Field {field!r} should not be empty", actual=getattr(user, field))

    @staticmethod
    def _assert_member(field: str, value: Any, allowed: tuple) -> None:
        if value not in allowed:
            raise VerificationError(f"Field {field!r} outside allowed values", expected=allowed, actual=value)
