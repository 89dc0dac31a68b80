"""Concrete adapters implementing the sink and transform ports."""

from __future__ import annotations

from .decorators import (
    CompressionDecorator,
    EncryptionDecorator,
    SinkDecorator,
    chain_leaf,
    describe_chain,
    iter_chain,
)
from .file_sink import FileDataSink, IOFailure
from .transforms import FernetTransform, LabelTransform, ZlibTransform, strip_markers

__all__ = [
    "FileDataSink",
    "IOFailure",
    "SinkDecorator",
    "EncryptionDecorator",
    "CompressionDecorator",
    "FernetTransform",
    "ZlibTransform",
    "LabelTransform",
    "strip_markers",
    "iter_chain",
    "describe_chain",
    "chain_leaf",
]
