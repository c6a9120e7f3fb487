"""
Roster API - Error Handling Lesson (api9)
=========================================

What:  GET /api9/error always raises, to exercise ErrorHandlingMiddleware.
       The client receives 500 {"Error": "Internal Server Error",
       "Message": "Something went wrong!"}.
"""

from fastapi import APIRouter

from app.schemas.user import ErrorResponse

router = APIRouter(prefix="/api9", tags=["#9: Error Handling"])


@router.get(
    "/error",
    responses={500: {"description": "Always fails", "model": ErrorResponse}},
    summary="Trigger the global error handler",
)
async def trigger_error() -> None:
    raise RuntimeError("Something went wrong!")
