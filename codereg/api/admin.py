"""
Admin endpoints
"""
from fastapi import APIRouter

from codereg import state


router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/reset")
async def reset_state():
    """Drop every student, hackathon and team held in memory"""
    cleared = state.CONTROLLER.reset()

    return {
        "success": True,
        "cleared": cleared,
        "message": "All in-memory state reset"
    }
