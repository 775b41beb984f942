"""
Shared fixtures
"""
import random
from datetime import date

import pytest
from fastapi.testclient import TestClient

from codereg import state
from codereg.controller import HackathonController
from codereg.main import app
from codereg.models import HackathonCreate, Settings, StudentCreate


def _student_form(n: int, **overrides) -> StudentCreate:
    data = {
        "name": f"Student {n}",
        "roll_number": f"21CS{n:03d}",
        "email": f"student{n}@example.com",
        "phone_number": f"98765{n:05d}",
    }
    data.update(overrides)
    return StudentCreate(**data)


def _hackathon_form(name: str = "CodeFest") -> HackathonCreate:
    return HackathonCreate(
        name=name,
        date=date(2026, 11, 14),
        description="24h campus hackathon",
        max_teams=10
    )


@pytest.fixture
def student_form():
    return _student_form


@pytest.fixture
def hackathon_form():
    return _hackathon_form


@pytest.fixture
def controller():
    return HackathonController(rng=random.Random(42))


@pytest.fixture
def client():
    state.configure(Settings(), rng=random.Random(7))
    yield TestClient(app)
    state.configure(Settings())
