"""
Failure taxonomy for contract scenarios

Contract failures subclass AssertionError so pytest reports them as test
failures; transport failures subclass RuntimeError so they are never mistaken
for an error status returned by the API.
"""

from typing import Any, Optional


class ContractTestError(Exception):
    """Base class for every failure raised by the suite"""

    kind = "error"


class ScenarioFailure(ContractTestError, AssertionError):
    """A scenario observed something other than the expected contract"""

    kind = "failure"


class PreconditionError(ScenarioFailure):
    """Required scenario state is absent, the API was not called"""

    kind = "precondition"


class UnexpectedStatusError(ScenarioFailure):
    """Remote status differs from the one the scenario expects"""

    kind = "unexpected_status"

    def __init__(self, expected: int, actual: int, body: str, context: str = ""):
        self.expected = expected
        self.actual = actual
        self.body = body
        prefix = f"{context}: " if context else ""
        super().__init__(f"{prefix}expected HTTP {expected}, got HTTP {actual} - body: {body!r}")


class DecodeError(ScenarioFailure):
    """Response body does not match the expected JSON shape"""

    kind = "decode"

    def __init__(self, shape: str, raw: str, reason: str):
        self.shape = shape
        self.raw = raw
        self.reason = reason
        super().__init__(f"Could not decode body as {shape}: {reason} - raw body: {raw!r}")


class VerificationError(ScenarioFailure):
    """Decoded value failed a field-level or membership check"""

    kind = "assertion"

    def __init__(self, message: str, expected: Any = None, actual: Any = None):
        self.expected = expected
        self.actual = actual
        detail = message
        if expected is not None or actual is not None:
            detail = f"{message} (expected {expected!r}, actual {actual!r})"
        super().__init__(detail)


class TransportError(ContractTestError, RuntimeError):
    """Request did not complete (timeout, connection failure, protocol error)"""

    kind = "transport"

    def __init__(self, method: str, url: str, cause: Optional[BaseException] = None):
        self.method = method
        self.url = url
        self.cause = cause
        reason = f"{type(cause).__name__}: {cause}" if cause else "unknown transport failure"
        super().__init__(f"{method} {url} did not complete - {reason}")
