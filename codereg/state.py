"""
Global application state
The one controller instance shared by all API routers
"""
from codereg.controller import HackathonController
from codereg.core.notifications import Notifier
from codereg.models import Settings

# Settings in effect (replaced at startup from config/codereg.yaml)
SETTINGS: Settings = Settings()

# Owner of every student, hackathon and team in this process
CONTROLLER: HackathonController = HackathonController()


def configure(settings: Settings, rng=None) -> HackathonController:
    """Install settings and a fresh controller built from them"""
    global SETTINGS, CONTROLLER
    SETTINGS = settings
    CONTROLLER = HackathonController(
        team_size=settings.team_size,
        notifier=Notifier(ttl=settings.notification_ttl),
        rng=rng
    )
    return CONTROLLER
