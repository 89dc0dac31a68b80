"""Data sink port interface for text read/write operations."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DataSinkPort(Protocol):
    """Port interface for a readable/writable text sink.

    Implemented by the file-backed leaf and by every decorator, so a
    decorated chain can be used anywhere a single sink is expected.

    Side effects: Writes to and reads from a backing store (offline).
    """

    def write_data(self, data: str) -> None:
        """Persist or forward ``data``.

        Args:
            data: Text to write

        I/O failures are reported by the leaf sink rather than raised.
        """
        ...

    def read_data(self) -> str | None:
        """Read previously written content.

        Returns:
            Content transformed by every wrapping layer, or ``None`` when
            the backing store could not be read.
        """
        ...
