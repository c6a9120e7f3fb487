"""
Roster API - Pagination Lesson (api10)
======================================

What:  GET /api10/users?page=&pageSize= returns one page of the shared
       service store with the total count.
How:   Offset pagination via app.services.query.paginate.

Example:
    GET /api10/users?page=2&pageSize=2
    → {"data": [{"id": 3, ...}, {"id": 4, ...}], "total": 4, "page": 2, "pageSize": 2}

Pages past the end return an empty `data` list. page < 1 and pageSize < 1
are rejected with 400. pageSize has no upper bound.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.config import settings
from app.dependencies import get_user_service
from app.schemas.user import UserPageResponse, UserResponse
from app.services.query import paginate
from app.services.user_repository import UserRepository

router = APIRouter(prefix="/api10", tags=["#10: Pagination"])


@router.get("/users", response_model=UserPageResponse, summary="List users page by page")
async def list_users_paged(
    page: int = Query(default=1, ge=1, description="Page number, starting at 1"),
    page_size: Optional[int] = Query(
        default=None,
        ge=1,
        alias="pageSize",
        description="Items per page (defaults to settings.default_page_size)",
    ),
    service: UserRepository = Depends(get_user_service),
) -> UserPageResponse:
    size = page_size or settings.default_page_size
    result = paginate(service.list_all(), page, size)
    return UserPageResponse(
        data=[UserResponse.model_validate(user) for user in result.items],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
    )
