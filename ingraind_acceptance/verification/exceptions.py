# =============================================================================
# INGRAIND ACCEPTANCE CHECK -- ERRORS
# File:   ingraind_acceptance/verification/exceptions.py
# =============================================================================
#
# SCOPE
# -----
# Exception hierarchy of the acceptance check. Exceptions are pure value
# objects: no side effects, no I/O, no printing.
#
# EXCEPTION HIERARCHY
# -------------------
#   CheckError(Exception)        -- base; never raised directly
#     ParseError(CheckError)     -- kernel release has no numeric triple
#
# A verification mismatch is NOT an exception. It is reported as a
# CheckResult with passed=False.
#
# =============================================================================

from __future__ import annotations

from typing import Any


class CheckError(Exception):
    """
    Base class for all acceptance check exceptions.

    Attributes:
        message:     Human-readable description. Always non-empty.
        field_name:  Name of the offending input, or empty string.
        value:       The offending input value, or None.
    """

    def __init__(
        self,
        message:    str,
        field_name: str = "",
        value:      Any = None,
    ) -> None:
        if not isinstance(message, str) or not message:
            raise ValueError(
                "CheckError: message must be a non-empty string"
            )
        if not isinstance(field_name, str):
            raise ValueError(
                "CheckError: field_name must be a string"
            )
        super().__init__(message)
        self.field_name: str = field_name
        self.value:      Any = value
        self.message:    str = message

    def __repr__(self) -> str:
        return (
            self.__class__.__name__
            + "(field_name=" + repr(self.field_name)
            + ", value=" + repr(self.value)
            + ", message=" + repr(self.message)
            + ")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CheckError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.field_name == other.field_name
            and self.value == other.value
            and self.message == other.message
        )


class ParseError(CheckError):
    """
    Raised when a kernel release string does not contain a dotted
    major.minor.patch triple.

    Fatal for the check: no default version is assumed and no partial
    verdict is produced.

    Message format:
        "ParseError: kernel release <raw!r> is not a dotted numeric
         major.minor.patch triple: <reason>."

    Args:
        raw:     The offending input, verbatim. Stored as ``value``.
        reason:  What was wrong with it. Must be non-empty.
    """

    def __init__(self, raw: Any, reason: str) -> None:
        if not isinstance(reason, str) or not reason:
            raise ValueError(
                "ParseError: reason must be a non-empty string"
            )
        message = (
            "ParseError: kernel release "
            + repr(raw)
            + " is not a dotted numeric major.minor.patch triple: "
            + reason
            + "."
        )
        super().__init__(message=message, field_name="kernel_release", value=raw)
        self.reason: str = reason


__all__ = [
    "CheckError",
    "ParseError",
]
