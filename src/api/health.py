"""Health check endpoint."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """Return application and simulation status."""
    city = getattr(request.app.state, "city", None)
    if city is None:
        return {"status": "error", "city": "not initialized"}
    return {"status": "ok", "city": "ready"}
