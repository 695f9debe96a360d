"""
Service root response models.
"""

from pydantic import BaseModel


class WelcomeResponse(BaseModel):
    """Body of GET /."""

    message: str
    version: str


class Endpoint(BaseModel):
    """One routed method and path."""

    method: str
    path: str


class DocsConfig(BaseModel):
    """Collaborators the running service talks to."""

    factory: str
    db: str


class DocsResponse(BaseModel):
    """Body of GET /api/docs."""

    version: str
    endpoints: list[Endpoint]
    config: DocsConfig
