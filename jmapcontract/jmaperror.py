"""
JMAP error taxonomy shared by the core and method plugins.

Provides:
- MethodError: method-level failures returned as an "error" method response
- SetError: per-object failures reported inside Foo/set responses
- HTTPProblem: request-level failures returned as application/problem+json (RFC 7807)
- One constructor per well-known error type, fixing the type tag (and title/status)

Constructors never fail and never inspect the description text. A wrapped cause
stays in the in-process exception chain and is never serialized.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

PROBLEM_CONTENT_TYPE = "application/problem+json"
PROBLEM_URN_PREFIX = "urn:ietf:params:jmap:error:"


class ErrorScope(Enum):
    """Where an error is reported."""
    METHOD = "method"
    SET = "set"
    REQUEST = "request"


class JMAPError(Exception):
    """Base class for all JMAP errors."""

    scope: ErrorScope

    @property
    def type(self) -> str:
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError


@dataclass(slots=True, eq=False)
class MethodError(JMAPError):
    """Method-level failure returned in methodResponses."""

    err_type: str
    description: str
    err: BaseException | None = None

    scope = ErrorScope.METHOD

    def __post_init__(self) -> None:
        if self.err is not None:
            self.__cause__ = self.err

    def __str__(self) -> str:
        return f"{self.err_type}: {self.description}"

    @property
    def type(self) -> str:
        return self.err_type

    def unwrap(self) -> BaseException | None:
        return self.err

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.err_type, "description": self.description}


@dataclass(slots=True, eq=False)
class SetError(JMAPError):
    """Per-object failure in a Foo/set operation."""

    err_type: str
    description: str
    properties: list[str] | None = None

    scope = ErrorScope.SET

    def __str__(self) -> str:
        return f"{self.err_type}: {self.description}"

    @property
    def type(self) -> str:
        return self.err_type

    def to_dict(self) -> dict[str, Any]:
        row: dict[str, Any] = {"type": self.err_type, "description": self.description}
        # An empty list is treated the same as no list.
        if self.properties:
            row["properties"] = list(self.properties)
        return row


@dataclass(slots=True, eq=False)
class HTTPProblem(JMAPError):
    """Request-level failure serialized as a problem details object."""

    problem_type: str
    title: str
    detail: str
    status: int
    limit: str = ""

    scope = ErrorScope.REQUEST

    def __str__(self) -> str:
        return f"{self.short_name}: {self.detail}"

    @property
    def short_name(self) -> str:
        """Trailing URN segment, e.g. "notJSON"."""
        return self.problem_type.rpartition(":")[2]

    @property
    def type(self) -> str:
        return self.problem_type

    def to_dict(self) -> dict[str, Any]:
        row: dict[str, Any] = {
            "type": self.problem_type,
            "title": self.title,
            "detail": self.detail,
            "status": self.status,
        }
        if self.limit:
            row["limit"] = self.limit
        return row


# --- MethodError constructors ---


def unknown_method(description: str) -> MethodError:
    return MethodError("unknownMethod", description)


def invalid_arguments(description: str) -> MethodError:
    return MethodError("invalidArguments", description)


def server_fail(description: str, err: BaseException | None = None) -> MethodError:
    """Server failure; ``err`` is kept for logging and never sent to clients."""
    return MethodError("serverFail", description, err)


def account_not_found(description: str) -> MethodError:
    return MethodError("accountNotFound", description)


def invalid_result_reference(description: str) -> MethodError:
    return MethodError("invalidResultReference", description)


def state_mismatch(description: str) -> MethodError:
    return MethodError("stateMismatch", description)


def forbidden(description: str) -> MethodError:
    return MethodError("forbidden", description)


def cannot_calculate_changes(description: str) -> MethodError:
    return MethodError("cannotCalculateChanges", description)


def unsupported_filter(description: str) -> MethodError:
    return MethodError("unsupportedFilter", description)


def unsupported_sort(description: str) -> MethodError:
    return MethodError("unsupportedSort", description)


def anchor_not_found(description: str) -> MethodError:
    return MethodError("anchorNotFound", description)


# --- SetError constructors ---


def not_found(description: str) -> SetError:
    return SetError("notFound", description)


def invalid_properties(description: str, properties: list[str] | None = None) -> SetError:
    """Invalid property values; ``properties`` names the offending properties."""
    return SetError("invalidProperties", description, list(properties) if properties is not None else None)


def too_large(description: str) -> SetError:
    return SetError("tooLarge", description)


def over_quota(description: str) -> SetError:
    return SetError("overQuota", description)


def too_many_pending(description: str) -> SetError:
    return SetError("tooManyPending", description)


def blob_not_found(description: str) -> SetError:
    return SetError("blobNotFound", description)


def invalid_mailbox_id(description: str) -> SetError:
    return SetError("invalidMailboxId", description)


def invalid_email(description: str) -> SetError:
    return SetError("invalidEmail", description)


def set_forbidden(description: str) -> SetError:
    return SetError("forbidden", description)


def invalid_patch(description: str) -> SetError:
    return SetError("invalidPatch", description)


def mailbox_has_email(description: str) -> SetError:
    """Mailbox cannot be destroyed while it still contains emails."""
    return SetError("mailboxHasEmail", description)


def set_server_fail(description: str) -> SetError:
    return SetError("serverFail", description)


# --- HTTPProblem constructors ---


def unknown_capability(detail: str) -> HTTPProblem:
    return HTTPProblem(PROBLEM_URN_PREFIX + "unknownCapability", "Unknown Capability", detail, 400)


def not_json(detail: str) -> HTTPProblem:
    return HTTPProblem(PROBLEM_URN_PREFIX + "notJSON", "Not JSON", detail, 400)


def not_request(detail: str) -> HTTPProblem:
    return HTTPProblem(PROBLEM_URN_PREFIX + "notRequest", "Not Request", detail, 400)


def limit(limit_name: str, detail: str) -> HTTPProblem:
    """Request exceeded a server limit such as ``maxSizeRequest``."""
    return HTTPProblem(PROBLEM_URN_PREFIX + "limit", "Limit Exceeded", detail, 400, limit_name)

