"""
Hackathon registration controller
Owns all in-memory state: students, hackathons, active view and notifications
"""
import logging
from typing import List, Optional

from codereg.core.ids import new_hackathon_id, new_student_id
from codereg.core.notifications import Notifier
from codereg.core.teams import DEFAULT_TEAM_SIZE, build_teams
from codereg.errors import (
    DuplicateStudentError, HackathonNotFoundError, InvalidViewError,
    NoRegisteredStudentsError, NoStudentsError
)
from codereg.models import (
    NAV_VIEWS, AppSnapshot, AppState, Hackathon, HackathonCreate,
    HackathonSummary, RegistrationResult, Student, StudentCreate, View
)


logger = logging.getLogger(__name__)


class HackathonController:
    """
    Single owner of the application state

    Every operation checks all of its preconditions before touching state,
    so a rejected call leaves everything as it was.
    """

    def __init__(self, team_size: int = DEFAULT_TEAM_SIZE, notifier: Optional[Notifier] = None, rng=None):
        self.team_size = team_size
        self.notifier = notifier or Notifier()
        self.rng = rng
        self.state = AppState()

    # ==================== STUDENTS ====================

    def register_student(self, form: StudentCreate) -> Student:
        """
        Register a new student

        Raises:
            DuplicateStudentError: email or roll number already registered
        """
        if any(s.email == form.email or s.roll_number == form.roll_number for s in self.state.students):
            message = "❌ Error: Student with this email or roll number already exists."
            notification = self.notifier.post(message, "error")
            logger.info(f"Rejected duplicate student {form.roll_number} <{form.email}>")
            raise DuplicateStudentError(message, notification)

        student = Student(id=new_student_id(), **form.model_dump())
        self.state.students.append(student)
        self.state.active_view = View.DASHBOARD
        self.notifier.post(f'✅ Student "{student.name}" registered successfully!', "success")
        logger.info(f"✅ Registered student {student.id} ({student.roll_number})")
        return student

    def list_students(self) -> List[Student]:
        return list(self.state.students)

    # ==================== HACKATHONS ====================

    def create_hackathon(self, form: HackathonCreate) -> Hackathon:
        """Create a hackathon with an empty roster and no teams"""
        hackathon = Hackathon(
            hackathon_id=new_hackathon_id(),
            registered_students=[],
            teams=[],
            **form.model_dump()
        )
        self.state.hackathons.append(hackathon)
        self.state.active_view = View.DASHBOARD
        self.notifier.post(f'🚀 Hackathon "{hackathon.name}" created!', "success")
        logger.info(f"🚀 Created hackathon {hackathon.hackathon_id} ({hackathon.name})")
        return hackathon

    def list_hackathons(self) -> List[Hackathon]:
        return list(self.state.hackathons)

    def get_hackathon(self, hackathon_id: str) -> Optional[Hackathon]:
        for hackathon in self.state.hackathons:
            if hackathon.hackathon_id == hackathon_id:
                return hackathon
        return None

    def _require_hackathon(self, hackathon_id: str) -> Hackathon:
        hackathon = self.get_hackathon(hackathon_id)
        if hackathon is None:
            message = f"❌ Error: Hackathon {hackathon_id} not found."
            notification = self.notifier.post(message, "error")
            logger.info(f"Rejected unknown hackathon {hackathon_id}")
            raise HackathonNotFoundError(message, notification)
        return hackathon

    def _replace_hackathon(self, updated: Hackathon) -> None:
        # Rebuild the list so only the target record changes identity
        self.state.hackathons = [
            updated if h.hackathon_id == updated.hackathon_id else h
            for h in self.state.hackathons
        ]

    def register_last_student(self, hackathon_id: str) -> RegistrationResult:
        """
        Enroll the most recently registered student into a hackathon

        There is no way to pick another student; the latest registration
        is always the one enrolled.

        Raises:
            NoStudentsError: no student registered yet
            HackathonNotFoundError: unknown hackathon id
        """
        if not self.state.students:
            message = "⚠️ Please register a student first."
            notification = self.notifier.post(message, "warning")
            logger.warning(f"⚠️ Registration for {hackathon_id} rejected: no students yet")
            raise NoStudentsError(message, notification)

        hackathon = self._require_hackathon(hackathon_id)
        student = self.state.students[-1]

        if any(s.id == student.id for s in hackathon.registered_students):
            self.notifier.post(
                f'🤔 Student "{student.name}" is already registered for this hackathon.', "info"
            )
            logger.info(f"Student {student.id} already registered for {hackathon_id}")
            return RegistrationResult(registered=False, student=student, hackathon=hackathon)

        updated = hackathon.model_copy(update={
            "registered_students": [*hackathon.registered_students, student.model_copy()]
        })
        self._replace_hackathon(updated)
        self.notifier.post(f'👍 "{student.name}" registered for "{updated.name}".', "success")
        logger.info(f"👍 Student {student.id} registered for {hackathon_id}")
        return RegistrationResult(registered=True, student=student, hackathon=updated)

    # ==================== TEAMS ====================

    def generate_teams(self, hackathon_id: str) -> Hackathon:
        """
        Shuffle a hackathon's roster and split it into teams

        Previous teams are discarded. The active view switches to the
        team view and the hackathon becomes the current one.

        Raises:
            HackathonNotFoundError: unknown hackathon id
            NoRegisteredStudentsError: roster is empty
        """
        hackathon = self._require_hackathon(hackathon_id)
        if not hackathon.registered_students:
            message = "🤷 No registered students to form teams."
            notification = self.notifier.post(message, "warning")
            logger.warning(f"⚠️ Team generation for {hackathon_id} rejected: empty roster")
            raise NoRegisteredStudentsError(message, notification)

        teams = build_teams(hackathon, self.team_size, self.rng)
        updated = hackathon.model_copy(update={"teams": teams})
        self._replace_hackathon(updated)

        self.state.current_hackathon_id = hackathon_id
        self.state.active_view = View.VIEW_TEAMS
        self.notifier.post(f'🎉 Teams generated for "{hackathon.name}"!', "success")
        logger.info(
            f"🎉 Generated {len(teams)} teams for {hackathon_id} "
            f"from {len(hackathon.registered_students)} students"
        )
        return updated

    def current_hackathon(self) -> Optional[Hackathon]:
        if self.state.current_hackathon_id is None:
            return None
        return self.get_hackathon(self.state.current_hackathon_id)

    # ==================== VIEW ====================

    def navigate(self, view: View) -> View:
        """
        Switch views from the nav bar

        Raises:
            InvalidViewError: view_teams is only entered by generating teams
        """
        if view not in NAV_VIEWS:
            logger.info(f"Rejected navigation to {view.value}")
            raise InvalidViewError(f"View '{view.value}' cannot be selected from navigation")
        self.state.active_view = view
        return view

    def summaries(self) -> List[HackathonSummary]:
        return [
            HackathonSummary(
                hackathon_id=h.hackathon_id,
                name=h.name,
                date=h.date,
                description=h.description,
                max_teams=h.max_teams,
                registered_count=len(h.registered_students),
                teams_generated=len(h.teams) > 0
            )
            for h in self.state.hackathons
        ]

    def snapshot(self) -> AppSnapshot:
        return AppSnapshot(
            active_view=self.state.active_view,
            notification=self.notifier.current(),
            current_hackathon=self.current_hackathon(),
            hackathons=self.summaries(),
            student_count=len(self.state.students),
            notification_ttl=self.notifier.ttl
        )

    def reset(self) -> int:
        """Drop all state (testing only)"""
        count = len(self.state.students) + len(self.state.hackathons)
        self.state = AppState()
        self.notifier.reset()
        logger.info(f"🔄 Reset state. Cleared {count} records.")
        return count
