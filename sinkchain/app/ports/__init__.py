"""Port interfaces for the SinkChain application layer.

These protocol interfaces define contracts for adapters.
Composition logic depends on these ports, never on concrete implementations.
"""

__all__ = [
    "DataSinkPort",
    "TransformPort",
]

from sinkchain.app.ports.sink import DataSinkPort
from sinkchain.app.ports.transform import TransformPort
