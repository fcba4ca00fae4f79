"""Pub/Sub push request payloads."""

from __future__ import annotations

import base64
import binascii
import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any


class DecodeError(Exception):
    """Raised when a Pub/Sub payload cannot be read."""


def _object(payload: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise DecodeError(f"{what} must be an object")
    return payload


def _string(payload: Mapping[str, Any], key: str) -> str:
    if key not in payload:
        raise DecodeError(f"missing field {key!r}")
    if not isinstance(payload[key], str):
        raise DecodeError(f"field {key!r} must be a string")
    return payload[key]


@dataclass(frozen=True)
class PubSubMessage:
    """A single message inside a push request."""

    attributes: dict[str, str] | None
    message_id: str
    publish_time: str
    data: str


@dataclass(frozen=True)
class PubSubRequest:
    """A push request as delivered to a subscription endpoint."""

    subscription: str
    message: PubSubMessage

    @classmethod
    def from_dict(cls, payload: Any) -> PubSubRequest:
        """Build a request from its decoded JSON body."""
        payload = _object(payload, "request")
        if "message" not in payload:
            raise DecodeError("missing field 'message'")
        message = _object(payload["message"], "message")
        attributes = message.get("attributes")
        if attributes is not None:
            if not isinstance(attributes, Mapping) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in attributes.items()
            ):
                raise DecodeError("attributes must map strings to strings")
            attributes = dict(attributes)
        return cls(
            subscription=_string(payload, "subscription"),
            message=PubSubMessage(
                attributes=attributes,
                message_id=_string(message, "message_id"),
                publish_time=_string(message, "publish_time"),
                data=_string(message, "data"),
            ),
        )

    def decode_data(self, factory: Callable[[Any], Any] | None = None) -> Any:
        """Decode the base64 JSON data, optionally passing it through ``factory``."""
        try:
            value = json.loads(base64.b64decode(self.message.data, validate=True).decode("utf-8"))
        except (binascii.Error, ValueError) as exc:
            raise DecodeError(f"invalid data: {exc}") from exc
        if factory is None:
            return value
        try:
            return factory(value)
        except (TypeError, ValueError, KeyError) as exc:
            raise DecodeError(f"data does not fit the expected shape: {exc}") from exc