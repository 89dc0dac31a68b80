"""Filesystem-backed data sink implementation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from sinkchain.app.ports import DataSinkPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IOFailure:
    """Report describing a failed open/read/write on the backing file."""

    operation: Literal["write", "read"]
    path: Path
    cause: OSError | UnicodeError

    @property
    def message(self) -> str:
        return f"Error {_FAILURE_VERBS[self.operation]} file: {self.cause}"


_FAILURE_VERBS = {"write": "writing data to", "read": "reading data from"}


FailureHandler = Callable[[IOFailure], None]


class FileDataSink(DataSinkPort):
    """Leaf sink that stores text in a single file.

    Each call opens the file and releases it before returning. Open, encode
    and decode failures are logged and handed to ``on_failure``; they never
    propagate to the caller. Nothing is checked at construction, so a bad
    path only surfaces as a failure at I/O time. Reads concatenate lines without separators, so newlines do not survive
    a round trip.
    """

    def __init__(self, path: str | Path, *, on_failure: FailureHandler | None = None) -> None:
        self._path = Path(path)
        self._on_failure = on_failure

    @property
    def path(self) -> Path:
        """Return the backing file path."""
        return self._path

    def __repr__(self) -> str:
        return f"FileDataSink({str(self._path)!r})"

    def write_data(self, data: str) -> None:
        try:
            with self._path.open("w", encoding="utf-8") as handle:
                handle.write(data)
        except (OSError, UnicodeError) as exc:
            self._report(IOFailure("write", self._path, exc))
            return None

        logger.info("Data written to file: %s", data)
        return None

    def read_data(self) -> str | None:
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                content = "".join(line.rstrip("\n") for line in handle)
        except (OSError, UnicodeError) as exc:
            self._report(IOFailure("read", self._path, exc))
            return None

        logger.info("Data read from file: %s", content)
        return content

    def _report(self, failure: IOFailure) -> None:
        logger.warning("%s (path=%s)", failure.message, failure.path)
        if self._on_failure is not None:
            self._on_failure(failure)
