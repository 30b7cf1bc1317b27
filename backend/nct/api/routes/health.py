from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Liveness endpoint for the load balancer.

    Returns 503 during graceful shutdown so traffic drains.
    """
    if getattr(request.app.state, "shutting_down", False):
        return JSONResponse(
            status_code=503,
            content={"status": "shutting_down", "service": "nct-engine"},
        )
    return {"status": "healthy", "service": "nct-engine"}
