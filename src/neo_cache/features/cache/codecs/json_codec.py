"""JSON entry codec.

Encodes values to compact JSON for the remote cache and decodes them back,
tolerating opaque framing bytes the remote-cache transport may have placed
around the payload.
"""

import json
import re
from typing import Any, Generic, Iterator, Optional, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from ....core.exceptions.infrastructure import CacheSerializationError, CacheDecodeError

V = TypeVar('V')

_OPENERS = re.compile(r"[\[{]")
_DECODER = json.JSONDecoder()


def iter_payloads(data: bytes) -> Iterator[bytes]:
    """Yield every complete JSON object or array embedded in data.

    Each ``{`` or ``[`` is tried as a start, in order. From a start exactly
    one JSON value is parsed and whatever follows it is ignored, so framing
    bytes on either side never leak into a payload. Framing bytes that are
    not valid UTF-8 are carried through unchanged.
    """
    text = data.decode("utf-8", errors="surrogateescape")
    for match in _OPENERS.finditer(text):
        start = match.start()
        try:
            _, end = _DECODER.raw_decode(text, start)
        except ValueError:
            continue
        yield text[start:end].encode("utf-8", errors="surrogateescape")


def extract_payload(data: bytes) -> bytes:
    """Return the first complete JSON object or array found inside data.

    Raises:
        CacheDecodeError: If no well-formed region exists
    """
    payload = next(iter_payloads(data), None)
    if payload is None:
        raise CacheDecodeError("No JSON payload found in cached value", data=data)
    return payload


class JsonEntryCodec(Generic[V]):
    """JSON codec backed by a pydantic ``TypeAdapter``.

    Works for any type pydantic can validate: dataclasses, models, typed
    dicts and containers of those. The encoded top level must be a JSON
    object or array so the payload can be located inside an envelope.
    """

    def __init__(self, value_type: Type[V]):
        self._value_type = value_type
        self._adapter: TypeAdapter[V] = TypeAdapter(value_type)

    @property
    def value_type(self) -> Any:
        return self._value_type

    def encode(self, value: V) -> bytes:
        """Serialize value to JSON bytes."""
        try:
            encoded = self._adapter.dump_json(value)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise CacheSerializationError(
                f"JSON serialization failed: {e}",
                details={"value_type": type(value).__name__}
            ) from e

        if encoded[:1] not in (b"{", b"["):
            raise CacheSerializationError(
                "Cached values must encode to a JSON object or array",
                details={"value_type": type(value).__name__}
            )
        return encoded

    def decode(self, data: Union[bytes, str]) -> V:
        """Deserialize the first payload in data that validates as the value type."""
        if isinstance(data, str):
            data = data.encode("utf-8")

        last_error: Optional[Exception] = None
        for payload in iter_payloads(data):
            try:
                return self._adapter.validate_json(payload)
            except (ValidationError, TypeError, ValueError) as e:
                last_error = e

        if last_error is None:
            raise CacheDecodeError("No JSON payload found in cached value", data=data)
        raise CacheDecodeError(
            f"Cached payload is not a valid {self._value_type!r}: {last_error}", data=data
        ) from last_error
