"""
Domain rejections raised by the controller

Each carries the user-visible message, the notification posted for it (if
any) and the HTTP status the API answers with.
"""


class CodeRegError(ValueError):
    status_code = 400

    def __init__(self, message: str, notification=None):
        super().__init__(message)
        self.message = message
        self.notification = notification


class DuplicateStudentError(CodeRegError):
    """Email or roll number already taken"""
    status_code = 409


class NoStudentsError(CodeRegError):
    """No student has been registered yet"""
    status_code = 409


class HackathonNotFoundError(CodeRegError):
    status_code = 404


class NoRegisteredStudentsError(CodeRegError):
    """Hackathon roster is empty at team generation time"""
    status_code = 409


class InvalidViewError(CodeRegError):
    status_code = 400
