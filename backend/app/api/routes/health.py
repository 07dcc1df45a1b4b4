"""Health endpoint polled by the client to detect a live server."""

from fastapi import APIRouter, Response, status

router = APIRouter()


@router.get(
    "/healthz",
    summary="Liveness check",
    status_code=status.HTTP_200_OK,
)
def liveness_probe() -> Response:
    """Return 200 with an empty body."""
    return Response(status_code=status.HTTP_200_OK)
