"""
Roster API - Basics Lessons (api1 to api5)
==========================================

What:  The first five lessons: plain text, fixed JSON, body binding,
       name validation with an envelope, and route parameter checks.
How:   One APIRouter per lesson, each under its own /apiN prefix.

Route Inventory:
    GET  /api1/hello               → "Hello, World!" (text/plain)
    GET  /api2/user                → fixed sample user
    POST /api3/greet               → "Hello, {name}!" (text/plain)
    POST /api4/validate            → 200 envelope, or 400 envelope on blank name
    GET  /api5/user_id[/]          → 400 {"error": "User ID is required."}
    GET  /api5/user_id/{user_id}   → {userId, message}, or 400 {error}
"""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.schemas.user import (
    ApiResponse,
    NameRequest,
    SampleUserResponse,
    UserIdErrorResponse,
    UserIdResponse,
)
from app.services.validation import parse_user_id, require_name

logger = logging.getLogger(__name__)

SAMPLE_USER = SampleUserResponse(id=1, name="John Doe", email="john@example.com")


# ── Lesson 1: Hello, World! ───────────────────────────────────────────────
hello_router = APIRouter(prefix="/api1", tags=["#1: Hello, World!"])


@hello_router.get("/hello", response_class=PlainTextResponse, summary="Plain text greeting")
async def hello() -> str:
    return "Hello, World!"


# ── Lesson 2: JSON response ───────────────────────────────────────────────
sample_user_router = APIRouter(prefix="/api2", tags=["#2: User"])


@sample_user_router.get("/user", response_model=SampleUserResponse, summary="Fixed sample user")
async def get_sample_user() -> SampleUserResponse:
    return SAMPLE_USER


# ── Lesson 3: Request body binding ────────────────────────────────────────
greet_router = APIRouter(prefix="/api3", tags=["#3: Greeting"])


@greet_router.post("/greet", response_class=PlainTextResponse, summary="Greet by name")
async def greet(body: NameRequest) -> str:
    """Echo the posted name in a greeting. No validation in this lesson."""
    return f"Hello, {body.name or ''}!"


# ── Lesson 4: Validation with a response envelope ─────────────────────────
validate_router = APIRouter(prefix="/api4", tags=["#4: Validation"])


@validate_router.post(
    "/validate",
    response_model=ApiResponse[str],
    responses={400: {"description": "Name is blank", "model": ApiResponse[str]}},
    summary="Validate a name",
)
async def validate_name(body: NameRequest) -> ApiResponse[str]:
    """
    Reject blank names, greet valid ones.

    A blank name raises ValidationError; the global handler renders it as
    {"statusCode": 400, "message": "Name is required.", "data": null}.
    """
    name = require_name(body.name)
    return ApiResponse[str](status_code=200, message=f"Hello, {name}!", data=name)


# ── Lesson 5: Route parameters ────────────────────────────────────────────
user_id_router = APIRouter(prefix="/api5", tags=["#5: User"])

_ID_ERROR_RESPONSES = {400: {"description": "Invalid user id", "model": UserIdErrorResponse}}


@user_id_router.get("/user_id", responses=_ID_ERROR_RESPONSES, summary="Missing user id")
@user_id_router.get("/user_id/", responses=_ID_ERROR_RESPONSES, include_in_schema=False)
async def user_id_missing() -> None:
    """Always 400: the id segment was not supplied."""
    parse_user_id(None)


@user_id_router.get(
    "/user_id/{user_id}",
    response_model=UserIdResponse,
    responses=_ID_ERROR_RESPONSES,
    summary="Get user by id",
)
async def get_user_id(user_id: str) -> UserIdResponse:
    """
    Validate the raw id segment and acknowledge it.

    The segment is taken as a string so each failure gets its own message
    instead of the framework's generic integer-parsing error.
    """
    value = parse_user_id(user_id)
    return UserIdResponse(user_id=value, message=f"User with ID {value} retrieved.")


routers = [hello_router, sample_user_router, greet_router, validate_router, user_id_router]
