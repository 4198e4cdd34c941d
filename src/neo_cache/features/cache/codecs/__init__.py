"""Entry codecs for the remote cache tier."""

from .json_codec import JsonEntryCodec, extract_payload

__all__ = [
    "JsonEntryCodec",
    "extract_payload",
]
