"""
Roster API - Dependency Providers
=================================

What:  FastAPI dependencies that hand each route its repository.
How:   The application factory builds one UserRepository per lesson and
       stores them on `app.state`; these providers read them back from the
       current request. Nothing here is module-global, so every app
       instance (one per test, for example) has independent stores.

Lesson → repository:
    api6            crud_repository     (Alice, Bob, Mark)
    api7            search_repository   (six names mixing Alice/Bob)
    api8, api10     user_service        (Alice, Bob, Tom, Jerry)

Example usage in a route:
    @router.get("/users")
    async def list_users(repo: UserRepository = Depends(get_user_service)):
        return repo.list_all()
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Path, Request

from app.services.user_repository import UserRepository
from app.services.validation import INT32_MAX, INT32_MIN

CRUD_SEED = ("Alice", "Bob", "Mark")
SEARCH_SEED = (
    "111-Alice",
    "111-Bob",
    "Alice-222",
    "Bob-222",
    "333-Alice-333",
    "333-Bob-333",
)
SERVICE_SEED = ("Alice", "Bob", "Tom", "Jerry")

# Path ids bind as signed 32-bit integers; anything wider is a 400
UserIdPath = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX, description="User id")]


@dataclass
class Repositories:
    """The per-application set of lesson stores."""

    crud: UserRepository
    search: UserRepository
    service: UserRepository


def build_repositories(seed: bool = True) -> Repositories:
    """Create a fresh store for each lesson, seeded with the demo names unless told not to."""
    return Repositories(
        crud=UserRepository(CRUD_SEED if seed else (), label="crud"),
        search=UserRepository(SEARCH_SEED if seed else (), label="search"),
        service=UserRepository(SERVICE_SEED if seed else (), label="service"),
    )


def get_repositories(request: Request) -> Repositories:
    return request.app.state.repositories


def get_crud_repository(request: Request) -> UserRepository:
    """Store behind the in-memory CRUD lesson (api6)."""
    return get_repositories(request).crud


def get_search_repository(request: Request) -> UserRepository:
    """Store behind the search lesson (api7)."""
    return get_repositories(request).search


def get_user_service(request: Request) -> UserRepository:
    """Shared store behind the service (api8) and pagination (api10) lessons."""
    return get_repositories(request).service
