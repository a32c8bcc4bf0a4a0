"""Recipe group endpoints (v2)."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status

from recipes_api.api.dependencies import get_group_search_criteria, get_group_service
from recipes_api.auth.dependencies import CurrentUser, get_current_user
from recipes_api.core.exceptions import ErrorResponse
from recipes_api.schemas import CreateOrUpdateGroupRequest, GroupDto, GroupSearchCriteria
from recipes_api.services.groups import GroupService


router = APIRouter(prefix="/groups", tags=["Groups"])

GroupId = Annotated[int, Path(description="Group identifier")]
Service = Annotated[GroupService, Depends(get_group_service)]
Caller = Annotated[CurrentUser, Depends(get_current_user)]


@router.post(
    "",
    response_model=GroupDto,
    status_code=status.HTTP_201_CREATED,
    summary="Create a recipe group",
    responses={
        401: {"model": ErrorResponse, "description": "Authentication required"},
        422: {"model": ErrorResponse, "description": "Validation failed"},
    },
)
async def create_group(
    body: CreateOrUpdateGroupRequest,
    request: Request,
    response: Response,
    service: Service,
    user: Caller,
) -> GroupDto:
    """Create a group of existing recipes owned by the caller."""
    dto = await service.create(body, user.id)
    response.headers["Location"] = request.app.url_path_for(
        "read_group", group_id=dto.id
    )
    return dto


@router.get(
    "/{group_id}",
    response_model=GroupDto,
    summary="Get a recipe group",
    responses={404: {"model": ErrorResponse, "description": "Group not found"}},
)
async def read_group(group_id: GroupId, service: Service) -> GroupDto:
    return await service.read_single(group_id)


@router.get("", response_model=list[GroupDto], summary="Search recipe groups")
async def search_groups(
    criteria: Annotated[GroupSearchCriteria, Depends(get_group_search_criteria)],
    service: Service,
) -> list[GroupDto]:
    return await service.search(criteria)


@router.put(
    "/{group_id}",
    response_model=GroupDto,
    summary="Update a recipe group",
    responses={
        401: {"model": ErrorResponse, "description": "Caller is not the owner"},
        404: {"model": ErrorResponse, "description": "Group not found"},
        422: {"model": ErrorResponse, "description": "Validation failed"},
    },
)
async def update_group(
    group_id: GroupId,
    body: CreateOrUpdateGroupRequest,
    service: Service,
    user: Caller,
) -> GroupDto:
    return await service.update(group_id, body, user.id)


@router.delete(
    "/{group_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a recipe group",
    responses={
        401: {"model": ErrorResponse, "description": "Caller is not the owner"},
        404: {"model": ErrorResponse, "description": "Group not found"},
    },
)
async def delete_group(group_id: GroupId, service: Service, user: Caller) -> None:
    """Delete the group; the recipes it lists are kept."""
    await service.delete(group_id, user.id)
