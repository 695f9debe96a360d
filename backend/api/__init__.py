"""
JWT Pizza API package.

Provides the FastAPI application for the pizza service. The application
instance lives in api.app (uvicorn target "api.app:app").
"""
