from typing import Any

from calbounds.observability.logging import log


class PreconditionViolation(ValueError):
    """
    Raised when a caller breaks a documented precondition.

    This is a bug at the call site (e.g. a zero offset or month 13), not a
    runtime condition. Do not catch it as part of normal control flow.
    """


def require(condition: bool, message: str, **fields: Any) -> None:
    if condition:
        return

    log().error("precondition_violated", reason=message, **fields)
    raise PreconditionViolation(message)
