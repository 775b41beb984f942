"""Identifier generation"""
import uuid


def _unique_suffix() -> str:
    return uuid.uuid4().hex[:16]


def new_student_id() -> str:
    return f"S{_unique_suffix()}"


def new_hackathon_id() -> str:
    return f"H{_unique_suffix()}"
