"""Inbound event handling for WeChat server callbacks.

WeChat can deliver events in plaintext, compatible or safe (AES) mode. Only
plaintext delivery is handled here; the AES scheme is left to a custom
:class:`EventCodec` supplied by the caller.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from wechat_sdk_core.exceptions import EncryptedEventNotSupportedError


@runtime_checkable
class EventCodec(Protocol):
    """Translates callback payloads between wire form and plain dicts."""

    def decode(self, event: dict[str, Any]) -> dict[str, Any]:
        """Turn an inbound payload into a plain event."""
        ...

    def encode(self, response: dict[str, Any]) -> dict[str, Any]:
        """Turn an outbound response into wire form."""
        ...


def is_encrypted(event: dict[str, Any]) -> bool:
    """Return True if the payload was delivered in safe (AES) mode."""
    return event.get("encrypt_type") == "aes" or "Encrypt" in event


class PlaintextEventCodec:
    """Codec for plaintext-mode deliveries; refuses encrypted payloads."""

    def decode(self, event: dict[str, Any]) -> dict[str, Any]:
        if is_encrypted(event):
            msg = "encrypted callback events need an EventCodec that implements decryption"
            raise EncryptedEventNotSupportedError(msg)
        return event

    def encode(self, response: dict[str, Any]) -> dict[str, Any]:
        return response
