"""Utility modules for SinkChain."""
