"""
Roster API - Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the API contract of every lesson.
How:   FastAPI validates request bodies against the request models and
       serializes responses through the response models (by alias).

Wire conventions:
    - Responses use camelCase keys (statusCode, userId, pageSize).
    - Request bodies accept either "name" or "Name", so clients written
      against the PascalCase examples (-d '{"Name": "Alice"}') keep working.
    - The catch-all error body keeps PascalCase keys: {"Error", "Message"}.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel, to_pascal

T = TypeVar("T")

_camel_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ══════════════════════════════════════════════════════════════════════════
# Request Models - What clients send in JSON bodies
# ══════════════════════════════════════════════════════════════════════════


class NameRequest(BaseModel):
    """
    Body carrying a single name (lessons 3 and 4).

    `name` is optional at the schema level: a missing or null name is a
    business-rule failure (400 envelope), not a schema failure.
    """
    name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("name", "Name"),
        description="User name",
    )


class UserRequest(NameRequest):
    """Create/update body for the CRUD lesson. A client-sent id is ignored."""
    id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("id", "Id"),
        description="Ignored; ids are assigned by the repository",
    )


class CreateUserRequest(BaseModel):
    """Create body for the service lesson; an omitted name defaults to 'noname'."""
    name: Optional[str] = Field(
        default="noname",
        validation_alias=AliasChoices("name", "Name"),
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models - What the API returns
# ══════════════════════════════════════════════════════════════════════════


class SampleUserResponse(BaseModel):
    """Fixed demo user returned by GET /api2/user."""
    model_config = _camel_config

    id: int
    name: str
    email: str


class UserResponse(BaseModel):
    """A stored user."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int = Field(description="Repository-assigned identifier")
    name: str = Field(description="User name")


class ApiResponse(BaseModel, Generic[T]):
    """
    Response envelope: status code, message and payload.

    Example (validation failure):
        {"statusCode": 400, "message": "Name is required.", "data": null}
    """
    model_config = _camel_config

    status_code: int = Field(description="HTTP status code, repeated in the body")
    message: str = Field(default="", description="Human-readable message")
    data: Optional[T] = Field(default=None, description="Payload, null on failure")


class UserIdResponse(BaseModel):
    """Body of GET /api5/user_id/{id}."""
    model_config = _camel_config

    user_id: int
    message: str


class UserIdErrorResponse(BaseModel):
    """400 body for a missing, non-numeric or negative id segment."""
    error: str


class UserPageResponse(BaseModel):
    """One page of users plus pagination metadata (lesson 10)."""
    model_config = _camel_config

    data: List[UserResponse]
    total: int = Field(description="Total number of users, across all pages")
    page: int = Field(description="1-based page number")
    page_size: int = Field(description="Requested page size")


class ErrorResponse(BaseModel):
    """
    Body produced by the catch-all error middleware.

    Example:
        {"Error": "Internal Server Error", "Message": "Something went wrong!"}
    """
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    error: str = Field(description="Status phrase: Bad Request or Internal Server Error")
    message: str = Field(description="Exception message")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    users: int = Field(description="Users in the shared service repository")
    uptime_seconds: float = Field(description="Seconds since service started")
