"""SinkChain - composable encryption and compression layers over a file sink.

Decorators wrap a file-backed text sink and can be stacked in any order.
"""

__version__ = "0.1.0"
__author__ = "SinkChain Contributors"

from sinkchain.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
