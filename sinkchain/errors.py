"""Exception hierarchy for SinkChain."""


class SinkChainError(Exception):
    """Base exception for all SinkChain errors."""


class TransformError(SinkChainError):
    """Raised when a read-side transform cannot decode its input."""

    def __init__(self, transform: str, message: str) -> None:
        super().__init__(f"{transform}: {message}")
        self.transform = transform


class ChainError(SinkChainError):
    """Raised when a decorator chain loops back on itself."""


class ConfigurationError(SinkChainError):
    """Raised when configured key material or options are unusable."""
