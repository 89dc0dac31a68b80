"""Application layer for SinkChain.

This layer orchestrates sink chains without direct filesystem I/O.
All side effects are delegated to adapters via port interfaces.
"""

__all__ = [
    "RoundTripResult",
    "RoundTripService",
]

from sinkchain.app.round_trip_service import RoundTripResult, RoundTripService
