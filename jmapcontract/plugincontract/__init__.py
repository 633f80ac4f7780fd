"""Plugin invocation contract: Args container, envelopes and their wire codec."""

from .args import Args, coerce_float, coerce_int
from .events import EventPayload
from .serialization import (
    decode_event,
    decode_method_response,
    decode_request,
    decode_response,
    dumps_payload,
    encode_event,
    encode_method_response,
    encode_request,
    encode_response,
    parse_json_object,
    safe_dict,
)
from .types import (
    ERROR_RESPONSE_NAME,
    MethodResponse,
    PluginInvocationRequest,
    PluginInvocationResponse,
    error_args,
    method_error_from_args,
)

__all__ = [
    "Args",
    "coerce_int",
    "coerce_float",
    "EventPayload",
    "ERROR_RESPONSE_NAME",
    "MethodResponse",
    "PluginInvocationRequest",
    "PluginInvocationResponse",
    "error_args",
    "method_error_from_args",
    "safe_dict",
    "dumps_payload",
    "parse_json_object",
    "encode_request",
    "decode_request",
    "encode_method_response",
    "decode_method_response",
    "encode_response",
    "decode_response",
    "encode_event",
    "decode_event",
]
