"""Observability exports for json-decode."""

from json_decode.observability.logging import setup_logging, shutdown_logging

__all__ = ["setup_logging", "shutdown_logging"]
