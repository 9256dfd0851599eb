"""Users API — create, read, update and delete users.

Errors are {"error": message}: 400 for a bad id, body or field, 404 when
get or update finds no user, 500 for storage failures. Delete is idempotent.
"""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from loguru import logger

from ..dependencies import get_user_service, parse_user_id, read_json_body
from ..exceptions import NotFoundError, PersistenceError, UsersApiError, ValidationError
from ..schemas.errors import ErrorResponse
from ..schemas.users import CreateUserRequest, UpdateUserRequest, UserView, validate_user_request
from ..services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _error(exc: UsersApiError, failure_message: str) -> JSONResponse:
    """Translate a service error into its JSON response.

    Persistence details are logged here and replaced by ``failure_message``.
    """
    if isinstance(exc, PersistenceError):
        logger.opt(exception=exc.__cause__ or exc).error(failure_message)
        return JSONResponse(status_code=500, content={"error": failure_message})
    if isinstance(exc, NotFoundError):
        logger.info("{}: {}", failure_message, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# ── Endpoints ────────────────────────────────────────────────────────


@router.post(
    "",
    response_model=UserView,
    response_model_exclude_none=True,
    status_code=201,
    responses=_ERROR_RESPONSES,
)
def create_user(
    payload: dict = Depends(read_json_body),
    svc: UserService = Depends(get_user_service),
):
    """Create a user. The response has no age."""
    try:
        req = validate_user_request(CreateUserRequest, payload)
    except ValidationError as e:
        return JSONResponse(status_code=400, content=e.to_dict())
    try:
        return svc.create(req)
    except UsersApiError as e:
        return _error(e, "failed to create user")


@router.get("", response_model=list[UserView], responses=_ERROR_RESPONSES)
def list_users(svc: UserService = Depends(get_user_service)):
    """All users in storage order, each with an age from the same snapshot."""
    try:
        return svc.list()
    except UsersApiError as e:
        return _error(e, "failed to list users")


@router.get("/{user_id}", response_model=UserView, responses=_ERROR_RESPONSES)
def get_user(
    user_id: int = Depends(parse_user_id),
    svc: UserService = Depends(get_user_service),
):
    try:
        return svc.get(user_id)
    except UsersApiError as e:
        return _error(e, "failed to get user")


@router.put(
    "/{user_id}",
    response_model=UserView,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
def update_user(
    user_id: int = Depends(parse_user_id),
    payload: dict = Depends(read_json_body),
    svc: UserService = Depends(get_user_service),
):
    """Replace a user's name and dob. The response has no age.

    An id with no matching user returns 404, not 500.
    """
    try:
        req = validate_user_request(UpdateUserRequest, payload)
    except ValidationError as e:
        return JSONResponse(status_code=400, content=e.to_dict())
    try:
        return svc.update(user_id, req)
    except UsersApiError as e:
        return _error(e, "failed to update user")


@router.delete("/{user_id}", status_code=204, response_class=Response, responses=_ERROR_RESPONSES)
def delete_user(
    user_id: int = Depends(parse_user_id),
    svc: UserService = Depends(get_user_service),
):
    """Delete a user. Deleting an id that does not exist also returns 204."""
    try:
        svc.delete(user_id)
    except UsersApiError as e:
        return _error(e, "failed to delete user")
    return Response(status_code=204)
