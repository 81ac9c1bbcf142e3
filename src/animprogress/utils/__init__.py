"""Small helpers shared by the command line and configuration layers."""

from .logging import get_logger
from .timeparse import parse_time

__all__ = ["get_logger", "parse_time"]
