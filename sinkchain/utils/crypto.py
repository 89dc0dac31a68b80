"""Utilities for key management and symmetric encryption."""

from __future__ import annotations

import base64
import os
from pathlib import Path

from cryptography.fernet import Fernet


def _write_secure_file(path: Path, data: bytes, *, mode: int = 0o600) -> None:
    """Write ``data`` to ``path`` and restrict permissions.

    Args:
        path: Target file path
        data: Bytes to persist
        mode: File mode to apply (POSIX style)
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    try:
        os.write(fd, data)
    finally:
        os.close(fd)

    try:
        os.chmod(path, mode)
    except PermissionError:
        # Windows may not support POSIX-style chmod; best effort only.
        pass


def load_or_create_fernet_key(path: Path) -> bytes:
    """Load an existing Fernet key from ``path`` or create a new one.

    Returns:
        Base64-encoded Fernet key bytes.
    """
    try:
        return path.read_bytes().strip()
    except FileNotFoundError:
        key = Fernet.generate_key()
        _write_secure_file(path, key)
        return key


def encrypt_text(data: str, *, cipher: Fernet) -> str:
    """Encrypt ``data`` and return the URL-safe Fernet token as text."""
    return cipher.encrypt(data.encode("utf-8")).decode("ascii")


def decrypt_text(token: str, *, cipher: Fernet) -> str:
    """Decrypt a token produced by :func:`encrypt_text`."""
    return cipher.decrypt(token.encode("ascii")).decode("utf-8")


def encode_bytes(data: bytes) -> str:
    """Encode binary data so it can live in a text sink."""
    return base64.b64encode(data).decode("ascii")


def decode_bytes(encoded: str) -> bytes:
    """Decode data produced by :func:`encode_bytes`."""
    return base64.b64decode(encoded.encode("ascii"), validate=True)
