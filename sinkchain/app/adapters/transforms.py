"""Transform pairs used by the sink decorators."""

from __future__ import annotations

import binascii
import zlib

from cryptography.fernet import Fernet, InvalidToken

from sinkchain.app.ports import TransformPort
from sinkchain.errors import ConfigurationError, TransformError
from sinkchain.utils.crypto import decode_bytes, decrypt_text, encode_bytes, encrypt_text


class FernetTransform(TransformPort):
    """Symmetric authenticated encryption using a Fernet key."""

    name = "fernet"

    def __init__(self, key: bytes) -> None:
        try:
            self._cipher = Fernet(key)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError("Fernet key must be 32 url-safe base64-encoded bytes") from exc

    def encode(self, data: str) -> str:
        return encrypt_text(data, cipher=self._cipher)

    def decode(self, data: str) -> str:
        try:
            return decrypt_text(data, cipher=self._cipher)
        except (InvalidToken, UnicodeError) as exc:
            raise TransformError(self.name, "content is not a token for this key") from exc


class ZlibTransform(TransformPort):
    """Deflate compression, base64-armoured so the sink stays textual."""

    name = "zlib"

    def __init__(self, level: int = 6) -> None:
        if not 0 <= level <= 9:
            raise ValueError(f"Compression level must be between 0 and 9, got {level}")
        self.level = level

    def encode(self, data: str) -> str:
        return encode_bytes(zlib.compress(data.encode("utf-8"), self.level))

    def decode(self, data: str) -> str:
        try:
            return zlib.decompress(decode_bytes(data)).decode("utf-8")
        except (binascii.Error, zlib.error, UnicodeError) as exc:
            raise TransformError(self.name, "content is not a compressed payload") from exc


class LabelTransform(TransformPort):
    """Cosmetic transform that only annotates text with markers.

    ``encode`` prefixes ``[label]``; ``decode`` prefixes ``[/label]`` and
    leaves the write marker in place, so it is not a true inverse.
    """

    def __init__(self, label: str) -> None:
        if not label:
            raise ValueError("label must be non-empty")
        self.name = label

    @property
    def write_marker(self) -> str:
        return f"[{self.name}]"

    @property
    def read_marker(self) -> str:
        return f"[/{self.name}]"

    def encode(self, data: str) -> str:
        return self.write_marker + data

    def decode(self, data: str) -> str:
        return self.read_marker + data


def strip_markers(text: str, transforms: list[LabelTransform]) -> str:
    """Peel the markers a label chain adds, leaving the original payload.

    Args:
        text: Result read back through the chain
        transforms: Label transforms of the chain, outermost first

    Raises:
        ValueError: If an expected marker is not where the chain puts it
    """
    # Reads prefix outermost first; writes prefix innermost first.
    expected = [t.read_marker for t in transforms] + [t.write_marker for t in reversed(transforms)]
    for marker in expected:
        if not text.startswith(marker):
            raise ValueError(f"Expected marker {marker!r} at start of {text!r}")
        text = text.removeprefix(marker)
    return text
