"""
Student registration endpoints
"""
from fastapi import APIRouter

from codereg import state
from codereg.api.responses import rejection
from codereg.errors import CodeRegError
from codereg.models import StudentCreate


router = APIRouter(prefix="/api/students", tags=["students"])


@router.get("")
async def list_students():
    """List registered students in registration order"""
    students = state.CONTROLLER.list_students()
    return {"students": students, "total": len(students)}


@router.post("", status_code=201)
async def register_student(form: StudentCreate):
    """
    Register a student

    Request:
        {
            "name": "Asha Rao",
            "roll_number": "21CS042",
            "email": "asha@example.com",
            "phone_number": "9876543210",
            "course": "B.Tech",    # optional
            "year": "3rd",         # optional
            "batch": "2022-26"     # optional
        }
    """
    controller = state.CONTROLLER
    try:
        student = controller.register_student(form)
    except CodeRegError as exc:
        return rejection(exc)

    return {
        "success": True,
        "student": student,
        "notification": controller.notifier.current()
    }
