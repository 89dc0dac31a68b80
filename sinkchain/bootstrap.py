"""Application bootstrap wiring the file sink, decorators, and services."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from sinkchain.app import RoundTripService
from sinkchain.app.adapters import (
    CompressionDecorator,
    EncryptionDecorator,
    FileDataSink,
    SinkDecorator,
)
from sinkchain.app.adapters.file_sink import FailureHandler
from sinkchain.app.ports import DataSinkPort
from sinkchain.config import Settings, get_settings

DECORATORS: dict[str, type[SinkDecorator]] = {
    "compression": CompressionDecorator,
    "encryption": EncryptionDecorator,
}

DEFAULT_LAYERS: tuple[str, ...] = ("compression", "encryption")


@dataclass(slots=True)
class ApplicationContainer:
    """Aggregates the wired sink chain and services for the CLI layer."""

    settings: Settings
    leaf: FileDataSink
    sink: DataSinkPort
    round_trip_service: RoundTripService


def build_chain(
    path: str | Path,
    settings: Settings | None = None,
    *,
    layers: Sequence[str] = DEFAULT_LAYERS,
    on_failure: FailureHandler | None = None,
) -> DataSinkPort:
    """Wrap a ``FileDataSink`` at ``path`` in the named decorators.

    Args:
        path: Backing file path
        settings: Settings used to build default transforms
        layers: Decorator names, innermost first
        on_failure: Optional callback for leaf I/O failures

    Returns:
        The outermost sink of the chain

    Raises:
        ValueError: If a layer name is unknown
    """
    return wrap_sink(FileDataSink(path, on_failure=on_failure), settings, layers=layers)


def wrap_sink(
    sink: DataSinkPort,
    settings: Settings | None = None,
    *,
    layers: Sequence[str] = DEFAULT_LAYERS,
) -> DataSinkPort:
    """Wrap ``sink`` in the named decorators, innermost first.

    Raises:
        ValueError: If a layer name is unknown
    """
    active_settings = settings or get_settings()
    unknown = [name for name in layers if name not in DECORATORS]
    if unknown:
        raise ValueError(
            f"Unknown layer(s): {', '.join(unknown)}. Expected one of: {', '.join(DECORATORS)}"
        )

    for name in layers:
        sink = DECORATORS[name](sink, settings=active_settings)
    return sink


def bootstrap_application(
    path: str | Path,
    settings: Settings | None = None,
    *,
    layers: Sequence[str] = DEFAULT_LAYERS,
    on_failure: FailureHandler | None = None,
) -> ApplicationContainer:
    """Create the application container for a sink chain at ``path``."""

    active_settings = settings or get_settings()
    leaf = FileDataSink(path, on_failure=on_failure)
    sink = wrap_sink(leaf, active_settings, layers=layers)

    return ApplicationContainer(
        settings=active_settings,
        leaf=leaf,
        sink=sink,
        round_trip_service=RoundTripService(sink),
    )
