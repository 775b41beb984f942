"""
Data models for the hackathon registration server
"""
from datetime import date as DateType
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


class View(str, Enum):
    """Presentation modes of the single-page UI"""
    DASHBOARD = "dashboard"
    REGISTER_STUDENT = "register_student"
    CREATE_HACKATHON = "create_hackathon"
    VIEW_TEAMS = "view_teams"


# Views reachable from the nav bar (view_teams only follows team generation)
NAV_VIEWS = (View.DASHBOARD, View.REGISTER_STUDENT, View.CREATE_HACKATHON)


class StudentCreate(BaseModel):
    """Student registration form"""
    name: str = Field(..., description="Full name of the student")
    roll_number: str = Field(..., description="Unique roll number e.g., 21CS042")
    email: EmailStr = Field(..., description="Unique email address (normalized)")
    phone_number: str = Field(..., description="Contact number")
    course: str = Field("", description="Course e.g., B.Tech (optional)")
    year: str = Field("", description="Year of study e.g., 3rd (optional)")
    batch: str = Field("", description="Batch e.g., 2022-26 (optional)")

    @field_validator("name", "roll_number", "email", "phone_number", "course", "year", "batch", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("name", "roll_number", "phone_number")
    @classmethod
    def required_text(cls, v: str) -> str:
        if not v:
            raise ValueError("field is required")
        return v


class Student(StudentCreate):
    """Registered student"""
    id: str


class HackathonCreate(BaseModel):
    """Hackathon creation form"""
    name: str = Field(..., description="Hackathon name")
    date: DateType = Field(..., description="Date the hackathon is held")
    description: str = Field(..., description="Free-text description")
    max_teams: int = Field(..., ge=1, description="Maximum team count (recorded only)")

    @field_validator("name", "description")
    @classmethod
    def required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field is required")
        return v


class TeamMember(BaseModel):
    """Member summary stored on a team (a copy, not a live student)"""
    id: str
    name: str
    email: str


class Team(BaseModel):
    """Generated team for one hackathon"""
    team_id: str
    hackathon_id: str
    members: List[TeamMember] = []


class Hackathon(HackathonCreate):
    """Hackathon event with its roster and team partition"""
    hackathon_id: str
    registered_students: List[Student] = []  # registration order, unique by id
    teams: List[Team] = []                   # replaced wholesale on generation


class HackathonSummary(BaseModel):
    """Dashboard card"""
    hackathon_id: str
    name: str
    date: DateType
    description: str
    max_teams: int
    registered_count: int
    teams_generated: bool


class Notification(BaseModel):
    """Transient banner message"""
    token: int
    message: str
    level: str = "info"  # "success" | "error" | "warning" | "info"
    posted_at: float


class AppState(BaseModel):
    """Everything the controller owns"""
    students: List[Student] = []
    hackathons: List[Hackathon] = []
    active_view: View = View.DASHBOARD
    current_hackathon_id: Optional[str] = None


class RegistrationResult(BaseModel):
    """Outcome of enrolling the last student into a hackathon"""
    registered: bool
    student: Student
    hackathon: Hackathon


class AppSnapshot(BaseModel):
    """State rendered by the UI"""
    active_view: View
    notification: Optional[Notification] = None
    current_hackathon: Optional[Hackathon] = None
    hackathons: List[HackathonSummary] = []
    student_count: int = 0
    notification_ttl: float = 3.0  # Seconds the page keeps a banner up


class Settings(BaseModel):
    """Server settings"""
    team_size: int = Field(4, ge=1)          # Members per generated team
    notification_ttl: float = Field(3.0, gt=0)  # Seconds before the banner clears
    host: str = "0.0.0.0"
    port: int = 8000
    static_dir: str = "static"
