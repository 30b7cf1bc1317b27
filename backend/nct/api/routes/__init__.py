from fastapi import APIRouter

from nct.api.routes import alignment, cycles, dashboard, health, teams, tree

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(alignment.router, prefix="/alignment", tags=["alignment"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(tree.router, prefix="/nct-tree", tags=["tree"])
api_router.include_router(cycles.router, prefix="/cycles", tags=["cycles"])
api_router.include_router(teams.router, prefix="/teams", tags=["teams"])
