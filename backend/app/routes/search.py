"""
Roster API - Search Lesson (api7)
=================================

What:  GET /api7/users/search?name= returns users whose name contains the
       query, ignoring case. Without a query every user is returned.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.dependencies import get_search_repository
from app.schemas.user import UserResponse
from app.services.query import filter_by_name
from app.services.user_repository import UserRepository

router = APIRouter(prefix="/api7", tags=["#7: Search"])


@router.get("/users/search", response_model=List[UserResponse], summary="Search users by name")
async def search_users(
    name: Optional[str] = Query(
        default=None,
        description="Substring to look for in the name (optional, case-insensitive)",
    ),
    repo: UserRepository = Depends(get_search_repository),
) -> List[UserResponse]:
    return [UserResponse.model_validate(u) for u in filter_by_name(repo.list_all(), name)]
