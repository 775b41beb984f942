"""
Single-page UI
"""
import os

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from codereg import state


router = APIRouter(tags=["ui"])


@router.get("/app", response_class=HTMLResponse)
async def app_ui():
    """Serve the registration page"""
    html_path = os.path.join(state.SETTINGS.static_dir, "index.html")

    if not os.path.exists(html_path):
        return HTMLResponse(
            content="<h1>UI not found</h1><p>Please create static/index.html</p>",
            status_code=404
        )

    with open(html_path, "r", encoding="utf-8") as f:
        return HTMLResponse(content=f.read())
