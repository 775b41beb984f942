"""
UI state endpoints: active view, snapshot and notification banner
"""
from fastapi import APIRouter, HTTPException

from codereg import state
from codereg.api.responses import rejection
from codereg.errors import CodeRegError
from codereg.models import View


router = APIRouter(prefix="/api", tags=["view"])


@router.get("/state")
async def get_state():
    """Everything the page needs to render the active view"""
    return state.CONTROLLER.snapshot()


@router.post("/view")
async def select_view(request: dict):
    """
    Switch the active view from the nav bar

    Request:
        {"view": "dashboard" | "register_student" | "create_hackathon"}
    """
    value = request.get("view")
    if not value:
        raise HTTPException(status_code=400, detail="view required")

    try:
        view = View(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown view: {value}")

    try:
        state.CONTROLLER.navigate(view)
    except CodeRegError as exc:
        return rejection(exc)

    return {"success": True, "active_view": view}


@router.post("/notification/clear")
async def clear_notification(request: dict):
    """
    Clear the banner if the token is still the one shown

    Request:
        {"token": 3}
    """
    token = request.get("token")
    if isinstance(token, bool) or not isinstance(token, int):
        raise HTTPException(status_code=400, detail="token (integer) required")

    cleared = state.CONTROLLER.notifier.clear(token)
    return {"cleared": cleared, "notification": state.CONTROLLER.notifier.current()}
