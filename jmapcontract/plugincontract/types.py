"""Invocation envelopes exchanged between the core and method plugins."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from jmapcontract.jmaperror import JMAPError, MethodError
from jmapcontract.plugincontract.args import Args

ERROR_RESPONSE_NAME = "error"


def error_args(err: JMAPError) -> Args:
    """Error-shaped Args for an "error" method response."""
    return Args(err.to_dict())


def method_error_from_args(args: Mapping[str, Any] | None) -> MethodError:
    """Rebuild a MethodError from an error-shaped payload received from a plugin."""
    row = Args.of(args)
    err_type = row.string_or("type", "") or "serverFail"
    return MethodError(err_type, row.string_or("description", ""))


@dataclass(frozen=True, slots=True)
class MethodResponse:
    """A single JMAP method response."""

    __hash__ = None  # args is a dict

    name: str
    args: Args = field(default_factory=Args)
    client_id: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", Args.of(self.args))

    @classmethod
    def for_error(cls, err: JMAPError, client_id: str) -> "MethodResponse":
        cause = err.__cause__
        if cause is not None:
            logger.warning("Method failed with {}: {} (cause: {!r})", err.type, err, cause)
        return cls(name=ERROR_RESPONSE_NAME, args=error_args(err), client_id=client_id)

    @property
    def is_error(self) -> bool:
        return self.name == ERROR_RESPONSE_NAME

    def to_error(self) -> MethodError | None:
        if not self.is_error:
            return None
        return method_error_from_args(self.args)


@dataclass(frozen=True, slots=True)
class PluginInvocationResponse:
    """Response sent from a plugin back to the core."""

    __hash__ = None

    method_response: MethodResponse


@dataclass(frozen=True, slots=True)
class PluginInvocationRequest:
    """Payload sent from the core to a plugin for one method call.

    ``cdn_url`` and ``api_url`` let plugins build absolute links to blobs and
    API resources. Nothing here is validated; that is the dispatcher's job.
    """

    __hash__ = None

    request_id: str
    call_index: int
    account_id: str
    method: str
    args: Args = field(default_factory=Args)
    client_id: str = ""
    cdn_url: str = ""
    api_url: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", Args.of(self.args))

    def respond(self, args: Mapping[str, Any] | None = None) -> PluginInvocationResponse:
        """Successful response echoing this call's method name and client id."""
        return PluginInvocationResponse(
            MethodResponse(name=self.method, args=Args.of(args), client_id=self.client_id)
        )

    def respond_error(self, err: JMAPError) -> PluginInvocationResponse:
        return PluginInvocationResponse(MethodResponse.for_error(err, self.client_id))
