"""
Service root endpoints.

A welcome message and a machine-readable list of the API's endpoints.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.engine import make_url

from shared.config import Settings

from ..dependencies import get_app_settings
from ..models.root import DocsConfig, DocsResponse, Endpoint, WelcomeResponse

router = APIRouter()

_HTTP_METHODS = {"get", "put", "post", "delete", "patch", "head", "options"}


@router.get("/", response_model=WelcomeResponse)
async def welcome(settings: Settings = Depends(get_app_settings)) -> WelcomeResponse:
    """Greeting with the running version."""
    return WelcomeResponse(message="welcome to JWT Pizza", version=settings.app_version)


@router.get("/api/docs", response_model=DocsResponse)
async def docs(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> DocsResponse:
    """
    List every endpoint the service exposes.

    The database URL is shown without its password.
    """
    paths = request.app.openapi()["paths"]
    endpoints = [
        Endpoint(method=method.upper(), path=path)
        for path, operations in paths.items()
        for method in sorted(operations)
        if method in _HTTP_METHODS
    ]
    return DocsResponse(
        version=settings.app_version,
        endpoints=endpoints,
        config=DocsConfig(
            factory=settings.factory_url,
            db=make_url(settings.database_url).render_as_string(hide_password=True),
        ),
    )
