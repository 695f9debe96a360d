"""API models package."""

from .errors import ErrorResponse
from .root import DocsConfig, DocsResponse, Endpoint, WelcomeResponse

__all__ = [
    "ErrorResponse",
    "DocsConfig",
    "DocsResponse",
    "Endpoint",
    "WelcomeResponse",
]
