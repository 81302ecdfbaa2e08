"""User API routes.

Handlers stay ``async def`` and call the blocking store on the event loop, so
one worker never interleaves two load-mutate-save cycles on the users file.
Moving them to ``def`` (threadpool) would allow lost updates.
"""

from typing import Any

from fastapi import APIRouter, Depends, status
from users_api.models.user import DeleteUserResponse, ErrorResponse
from users_api.services import get_user_service
from users_common.models.user import User, UserPayload
from users_common.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)

_ERRORS: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}
_RECORD: dict[str, Any] = {"response_model": User, "response_model_exclude_none": True, "responses": _ERRORS}


@router.post("", status_code=status.HTTP_201_CREATED, **_RECORD)
@router.post("/", status_code=status.HTTP_201_CREATED, include_in_schema=False, **_RECORD)
async def create_user(payload: UserPayload, service: UserService = Depends(get_user_service)) -> User:
    return service.create_user(payload)


@router.get("/{user_id}", **_RECORD)
@router.get("/{user_id}/", include_in_schema=False, **_RECORD)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> User:
    return service.get_user(user_id)


@router.put("/{user_id}", **_RECORD)
@router.put("/{user_id}/", include_in_schema=False, **_RECORD)
async def update_user(
    user_id: str,
    payload: UserPayload,
    service: UserService = Depends(get_user_service),
) -> User:
    """Update a user.

    The body must satisfy the same schema as create; falsy values keep the
    stored field.
    """
    return service.update_user(user_id, payload)


@router.delete("/{user_id}", response_model=DeleteUserResponse, responses=_ERRORS)
@router.delete("/{user_id}/", response_model=DeleteUserResponse, responses=_ERRORS, include_in_schema=False)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> DeleteUserResponse:
    service.delete_user(user_id)
    return DeleteUserResponse()
