"""Sink decorators that layer transforms around an inner data sink."""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Iterator

from sinkchain.app.adapters.transforms import FernetTransform, LabelTransform, ZlibTransform
from sinkchain.app.ports import DataSinkPort, TransformPort
from sinkchain.config import Settings, get_settings
from sinkchain.errors import ChainError

logger = logging.getLogger(__name__)


class SinkDecorator(DataSinkPort):
    """Base for sinks that wrap exactly one inner sink.

    Writes are encoded by this layer's transform and forwarded inward.
    Reads come back from the inner sink and are decoded on the way out;
    an absent inner result is passed through without touching the
    transform. Subclasses only decide which transform they use by default.
    ``inner`` is fixed at construction, so constructors cannot form a loop.
    """

    def __init__(
        self,
        inner: DataSinkPort,
        transform: TransformPort | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        if not isinstance(inner, DataSinkPort):
            raise TypeError(
                f"{type(self).__name__} can only wrap a data sink, got {type(inner).__name__}"
            )
        self._inner = inner
        if transform is None:
            transform = self.default_transform(settings or get_settings())
        self._transform = transform

    @classmethod
    @abstractmethod
    def default_transform(cls, settings: Settings) -> TransformPort:
        """Build the transform used when none is passed explicitly."""

    @property
    def inner(self) -> DataSinkPort:
        """Return the wrapped sink."""
        return self._inner

    @property
    def transform(self) -> TransformPort:
        """Return this layer's transform pair."""
        return self._transform

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._transform.name})"

    def write_data(self, data: str) -> None:
        encoded = self._transform.encode(data)
        logger.debug("%r forwarding write: %s", self, encoded)
        self._inner.write_data(encoded)

    def read_data(self) -> str | None:
        raw = self._inner.read_data()
        if raw is None:
            logger.debug("%r passing through absent read", self)
            return None
        decoded = self._transform.decode(raw)
        logger.debug("%r returning read: %s", self, decoded)
        return decoded


class EncryptionDecorator(SinkDecorator):
    """Encrypts on write and decrypts on read."""

    @classmethod
    def default_transform(cls, settings: Settings) -> TransformPort:
        if settings.transform_mode == "label":
            return LabelTransform("encrypted")
        return FernetTransform(settings.get_encryption_key())


class CompressionDecorator(SinkDecorator):
    """Compresses on write and decompresses on read."""

    @classmethod
    def default_transform(cls, settings: Settings) -> TransformPort:
        if settings.transform_mode == "label":
            return LabelTransform("compressed")
        return ZlibTransform(settings.compression_level)


def iter_chain(sink: DataSinkPort) -> Iterator[DataSinkPort]:
    """Yield every sink in a chain, outermost first, ending with the leaf.

    Chains may be arbitrarily deep.

    Raises:
        ChainError: If a sink appears twice
    """
    seen: set[int] = set()
    current: DataSinkPort = sink
    while True:
        if id(current) in seen:
            raise ChainError(f"Sink chain loops back to {current!r}")
        seen.add(id(current))
        yield current
        if not isinstance(current, SinkDecorator):
            return
        current = current.inner


def describe_chain(sink: DataSinkPort) -> list[str]:
    """Return a printable description of each layer, outermost first."""
    return [repr(layer) for layer in iter_chain(sink)]


def chain_leaf(sink: DataSinkPort) -> DataSinkPort:
    """Return the terminal sink of a chain."""
    *_, leaf = iter_chain(sink)
    return leaf
