"""
Typed failures raised by the stores and translated to HTTP responses in main.py
"""


class MessagelyError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MessagelyError):
    status_code = 400


class UniqueConstraintViolation(MessagelyError):
    status_code = 409


class InvalidCredentials(MessagelyError):
    status_code = 401

    def __init__(self, message: str = "Invalid username/password"):
        super().__init__(message)


class NotFound(MessagelyError):
    status_code = 404


class Forbidden(MessagelyError):
    status_code = 403
