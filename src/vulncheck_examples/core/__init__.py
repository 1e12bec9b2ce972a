"""Core types shared by the client adapters and the examples."""

from .errors import ApiError
from .ports.vulncheck_port import VulnCheckPort

__all__ = ["ApiError", "VulnCheckPort"]
