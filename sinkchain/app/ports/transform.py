"""Transform port interface for write/read transform pairs."""

from typing import Protocol


class TransformPort(Protocol):
    """Port interface for a write-side transform and its read-side inverse.

    Adapters implementing this port must provide:
    - ``encode`` applied on the way in (write)
    - ``decode`` applied on the way out (read)
    - A short ``name`` used in logs and chain descriptions

    Side effects: None.
    """

    name: str

    def encode(self, data: str) -> str:
        """Transform text before it is forwarded to the inner sink."""
        ...

    def decode(self, data: str) -> str:
        """Transform text read back from the inner sink.

        Raises:
            TransformError: If ``data`` was not produced by ``encode``
        """
        ...
