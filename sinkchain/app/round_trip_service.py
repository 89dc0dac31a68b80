"""Round-trip service that drives a write followed by a read through a sink."""

import logging

from pydantic import BaseModel, Field

from sinkchain.app.adapters.decorators import describe_chain
from sinkchain.app.ports import DataSinkPort

logger = logging.getLogger(__name__)


class RoundTripResult(BaseModel):
    """Outcome of writing a sample through a sink and reading it back."""

    written: str = Field(..., description="Text passed to the outermost sink")
    result: str | None = Field(default=None, description="Text read back, or None if absent")
    layers: list[str] = Field(default_factory=list, description="Chain layers, outermost first")

    @property
    def absent(self) -> bool:
        return self.result is None


class RoundTripService:
    """Writes a sample through a sink chain and reads it back.

    I/O failures are reported by the leaf sink, so ``run`` never raises
    for them; the absent result is returned instead.
    """

    def __init__(self, sink: DataSinkPort):
        self.sink = sink

    def run(self, sample: str) -> RoundTripResult:
        layers = describe_chain(self.sink)
        logger.info("Writing sample through %s", " -> ".join(layers))
        self.sink.write_data(sample)
        result = self.sink.read_data()
        if result is None:
            logger.warning("Round trip produced no result")
        return RoundTripResult(written=sample, result=result, layers=layers)
