"""
Hackathon endpoints: creation, registration and team generation
"""
from fastapi import APIRouter, HTTPException

from codereg import state
from codereg.api.responses import rejection
from codereg.errors import CodeRegError
from codereg.models import HackathonCreate


router = APIRouter(prefix="/api/hackathons", tags=["hackathons"])


def _not_found(hackathon_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Hackathon {hackathon_id} not found")


@router.get("")
async def list_hackathons():
    """Dashboard cards for every hackathon"""
    summaries = state.CONTROLLER.summaries()
    return {"hackathons": summaries, "total": len(summaries)}


@router.post("", status_code=201)
async def create_hackathon(form: HackathonCreate):
    """
    Create a hackathon

    Request:
        {
            "name": "CodeFest",
            "date": "2026-11-14",
            "description": "24h campus hackathon",
            "max_teams": 10
        }
    """
    controller = state.CONTROLLER
    hackathon = controller.create_hackathon(form)

    return {
        "success": True,
        "hackathon": hackathon,
        "notification": controller.notifier.current()
    }


@router.get("/{hackathon_id}")
async def get_hackathon(hackathon_id: str):
    """Full hackathon record with roster and teams"""
    hackathon = state.CONTROLLER.get_hackathon(hackathon_id)
    if hackathon is None:
        raise _not_found(hackathon_id)
    return hackathon


@router.post("/{hackathon_id}/register-last-student")
async def register_last_student(hackathon_id: str):
    """Enroll the most recently registered student"""
    controller = state.CONTROLLER
    try:
        result = controller.register_last_student(hackathon_id)
    except CodeRegError as exc:
        return rejection(exc)

    return {
        "success": True,
        "registered": result.registered,
        "student": result.student,
        "hackathon": result.hackathon,
        "notification": controller.notifier.current()
    }


@router.post("/{hackathon_id}/generate-teams")
async def generate_teams(hackathon_id: str):
    """Shuffle the roster and regenerate all teams"""
    controller = state.CONTROLLER
    try:
        hackathon = controller.generate_teams(hackathon_id)
    except CodeRegError as exc:
        return rejection(exc)

    return {
        "success": True,
        "hackathon": hackathon,
        "teams": hackathon.teams,
        "active_view": controller.state.active_view,
        "notification": controller.notifier.current()
    }


@router.get("/{hackathon_id}/teams")
async def list_teams(hackathon_id: str):
    """Teams of one hackathon"""
    hackathon = state.CONTROLLER.get_hackathon(hackathon_id)
    if hackathon is None:
        raise _not_found(hackathon_id)
    return {
        "hackathon_id": hackathon_id,
        "teams": hackathon.teams,
        "total_teams": len(hackathon.teams)
    }
