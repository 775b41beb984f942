"""
Health check and system status endpoints
"""
from fastapi import APIRouter

from codereg import __version__, state


router = APIRouter(tags=["health"])


@router.get("/")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "message": "CodeReg - Hackathon Registration Server",
        "version": __version__,
        "total_students": len(state.CONTROLLER.state.students),
        "total_hackathons": len(state.CONTROLLER.state.hackathons)
    }
