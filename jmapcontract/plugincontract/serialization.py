"""Serialization helpers for plugin invocation and event envelopes."""

from __future__ import annotations

import json
from typing import Any

from loguru import logger

from jmapcontract import jmaperror
from jmapcontract.plugincontract.args import Args, coerce_int
from jmapcontract.plugincontract.events import EventPayload
from jmapcontract.plugincontract.types import MethodResponse, PluginInvocationRequest, PluginInvocationResponse


def safe_dict(value: Any) -> dict[str, Any]:
    """Return the value when dict-like, otherwise an empty dict."""
    return value if isinstance(value, dict) else {}


def _field_str(row: dict[str, Any], key: str) -> str:
    value = row.get(key)
    if isinstance(value, str):
        return value
    if value is not None:
        logger.debug("Ignoring non-string {} of type {}", key, type(value).__name__)
    return ""


def _field_args(row: dict[str, Any], key: str) -> Args:
    value = row.get(key)
    if value is not None and not isinstance(value, dict):
        logger.debug("Ignoring non-object {} of type {}", key, type(value).__name__)
    return Args.of(value)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a JSON value")


def dumps_payload(payload: dict[str, Any]) -> str:
    """Encode a wire dict into one line of JSON.

    Raises ValueError when the payload holds NaN or an infinity, which have no
    JSON representation.
    """
    return json.dumps(payload, ensure_ascii=False, allow_nan=False)


def parse_json_object(text: str | bytes) -> dict[str, Any]:
    """Parse a request body; raises HTTPProblem for non-JSON or non-object input."""
    try:
        payload = json.loads(text, parse_constant=_reject_constant)
    except RecursionError as exc:
        raise jmaperror.not_json("request body is nested too deeply") from exc
    except ValueError as exc:
        # Covers JSONDecodeError, UnicodeDecodeError and NaN/Infinity tokens.
        raise jmaperror.not_json(f"request body is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise jmaperror.not_request(f"expected a JSON object, got {type(payload).__name__}")
    return payload


def encode_request(request: PluginInvocationRequest) -> dict[str, Any]:
    return {
        "requestId": request.request_id,
        "callIndex": request.call_index,
        "accountId": request.account_id,
        "method": request.method,
        "args": dict(request.args),
        "clientId": request.client_id,
        "cdnUrl": request.cdn_url,
        "apiUrl": request.api_url,
    }


def decode_request(payload: Any) -> PluginInvocationRequest:
    """Decode a raw dict into a request; malformed fields fall back to zero values."""
    row = safe_dict(payload)
    call_index, ok = coerce_int(row.get("callIndex"))
    if not ok and "callIndex" in row:
        logger.debug("Ignoring non-integer callIndex {!r}", row.get("callIndex"))
    return PluginInvocationRequest(
        request_id=_field_str(row, "requestId"),
        call_index=call_index,
        account_id=_field_str(row, "accountId"),
        method=_field_str(row, "method"),
        args=_field_args(row, "args"),
        client_id=_field_str(row, "clientId"),
        cdn_url=_field_str(row, "cdnUrl"),
        api_url=_field_str(row, "apiUrl"),
    )


def encode_method_response(response: MethodResponse) -> dict[str, Any]:
    return {"name": response.name, "args": dict(response.args), "clientId": response.client_id}


def decode_method_response(payload: Any) -> MethodResponse:
    row = safe_dict(payload)
    return MethodResponse(
        name=_field_str(row, "name"),
        args=_field_args(row, "args"),
        client_id=_field_str(row, "clientId"),
    )


def encode_response(response: PluginInvocationResponse) -> dict[str, Any]:
    return {"methodResponse": encode_method_response(response.method_response)}


def decode_response(payload: Any) -> PluginInvocationResponse:
    row = safe_dict(payload)
    return PluginInvocationResponse(decode_method_response(row.get("methodResponse")))


def encode_event(event: EventPayload) -> dict[str, Any]:
    """Encode an event; ``data`` is left out entirely when empty."""
    payload: dict[str, Any] = {
        "eventType": event.event_type,
        "occurredAt": event.occurred_at,
        "accountId": event.account_id,
    }
    if event.data:
        payload["data"] = dict(event.data)
    return payload


def decode_event(payload: Any) -> EventPayload:
    row = safe_dict(payload)
    return EventPayload(
        event_type=_field_str(row, "eventType"),
        occurred_at=_field_str(row, "occurredAt"),
        account_id=_field_str(row, "accountId"),
        data=_field_args(row, "data"),
    )
