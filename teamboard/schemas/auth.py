"""Auth TaskSchemas for Teamboard."""

from mindtrace.core import TaskSchema
from teamboard.models import AuthResponse, LoginPayload, SignupPayload

SignupSchema = TaskSchema(
    name="teamboard_signup",
    input_schema=SignupPayload,
    output_schema=AuthResponse,
)

LoginSchema = TaskSchema(
    name="teamboard_login",
    input_schema=LoginPayload,
    output_schema=AuthResponse,
)

__all__ = [
    "LoginSchema",
    "SignupSchema",
]
