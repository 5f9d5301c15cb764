"""API index page."""

from fastapi import APIRouter
from pydantic import BaseModel

from tome.util.observability import SERVICE_VERSION

router = APIRouter(tags=["info"])


class EndpointInfo(BaseModel):
    method: str
    path: str
    description: str


class ApiInfoResponse(BaseModel):
    name: str
    description: str
    version: str
    endpoints: list[EndpointInfo]


ENDPOINTS = [
    EndpointInfo(method="GET", path="/api/health", description="Health check"),
    EndpointInfo(
        method="GET", path="/api/comments/{characterId}", description="Get comments"
    ),
    EndpointInfo(method="POST", path="/api/comments", description="Create comment"),
    EndpointInfo(
        method="DELETE", path="/api/comments/{id}", description="Delete comment"
    ),
]


@router.get("/", response_model=ApiInfoResponse)
async def api_info() -> ApiInfoResponse:
    """List the public endpoints of the comments API."""
    return ApiInfoResponse(
        name="Tome Comments API",
        description="Threaded comments for character pages, served to the browser extension",
        version=SERVICE_VERSION,
        endpoints=ENDPOINTS,
    )
