"""Endpoint listing and health check."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request

from src.api.dependencies import get_app_settings
from src.config import Settings

router = APIRouter(tags=["meta"])

HTTP_METHODS = {"get", "put", "post", "delete", "options", "head", "patch", "trace"}


def list_endpoints(openapi_schema: dict[str, Any]) -> list[dict]:
    """Describe every API route as a path and its methods."""
    endpoints = []
    for path, operations in openapi_schema.get("paths", {}).items():
        methods = sorted(method.upper() for method in operations if method in HTTP_METHODS)
        endpoints.append({"path": path, "methods": methods})
    return endpoints


@router.get("/")
def index(request: Request):
    """List available endpoints."""
    return {
        "message": "Welcome to the happy thoughts API. Here is a list of all endpoints",
        "endpoints": list_endpoints(request.app.openapi()),
    }


@router.get("/health")
async def health_check(settings: Annotated[Settings, Depends(get_app_settings)]):
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
