"""API routes for groups of the content tree."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from wordtree.application.content.use_cases.group_use_case import GroupUseCase
from wordtree.application.content.use_cases.tree_query_use_case import TreeQueryUseCase
from wordtree.core import container
from wordtree.domain.common.exceptions import DomainError
from wordtree.exceptions import WordtreeError
from wordtree.infrastructure.common.di import inject_use_case
from wordtree.infrastructure.content.schemas import (
    GroupCopyRequest,
    GroupCreateRequest,
    GroupDeleteResponse,
    GroupItemsResponse,
    GroupMutationResponse,
    GroupPathResponse,
    GroupResponse,
    GroupUpdateRequest,
    TreeNodeResponse,
)
from wordtree.infrastructure.content.schemas.group_schemas import item_to_response
from wordtree.infrastructure.identity.dependencies import CurrentUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/groups", tags=["groups"])


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.get("/root", response_model=GroupResponse)
def get_root_group(
    current_user: CurrentUser,
    use_case: TreeQueryUseCase = Depends(inject_use_case(container.tree_query_use_case)),
) -> GroupResponse:
    """Get the current user's root group."""
    try:
        return GroupResponse.from_entity(use_case.get_root(current_user.user_id))
    except (WordtreeError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("get root group", e) from e


@router.get("/tree", response_model=TreeNodeResponse)
def get_full_tree(
    current_user: CurrentUser,
    use_case: TreeQueryUseCase = Depends(inject_use_case(container.tree_query_use_case)),
) -> TreeNodeResponse:
    """
    Get the whole group hierarchy of the current user.

    Cards are not included; fetch them per group through ``/groups/{id}/items``.
    """
    try:
        return TreeNodeResponse.from_tree(use_case.full_tree(current_user.user_id))
    except (WordtreeError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("build group tree", e) from e


@router.post("/copy", response_model=GroupMutationResponse, status_code=status.HTTP_201_CREATED)
def copy_group(
    request: GroupCopyRequest,
    current_user: CurrentUser,
    use_case: GroupUseCase = Depends(inject_use_case(container.group_use_case)),
) -> GroupMutationResponse:
    """
    Copy the group behind an invite code, with all nested groups and cards,
    into one of the current user's groups.
    """
    try:
        group = use_case.copy_by_invite_code(
            invite_code=request.invite_code,
            parent_id=request.parent_id,
            user_id=current_user.user_id,
        )
        return GroupMutationResponse(
            success=True,
            message="Group copied successfully",
            group=GroupResponse.from_entity(group),
        )
    except (WordtreeError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("copy group", e) from e


@router.get("/{group_id}", response_model=GroupResponse)
def get_group(
    group_id: int,
    current_user: CurrentUser,
    use_case: TreeQueryUseCase = Depends(inject_use_case(container.tree_query_use_case)),
) -> GroupResponse:
    try:
        return GroupResponse.from_entity(use_case.get_group(group_id, current_user.user_id))
    except (WordtreeError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"get group {group_id}", e) from e


@router.get("/{group_id}/items", response_model=GroupItemsResponse)
def list_group_items(
    group_id: int,
    current_user: CurrentUser,
    use_case: TreeQueryUseCase = Depends(inject_use_case(container.tree_query_use_case)),
) -> GroupItemsResponse:
    """List the cards and groups directly inside a group, cards first."""
    try:
        items = use_case.list_items(group_id, current_user.user_id)
        return GroupItemsResponse(items=[item_to_response(item) for item in items])
    except (WordtreeError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"list items of group {group_id}", e) from e


@router.get("/{group_id}/path", response_model=GroupPathResponse)
def get_group_path(
    group_id: int,
    current_user: CurrentUser,
    use_case: TreeQueryUseCase = Depends(inject_use_case(container.tree_query_use_case)),
) -> GroupPathResponse:
    """Get the ancestors of a group, starting with the group itself and ending at the root."""
    try:
        path = use_case.path_to_group(group_id, current_user.user_id)
        return GroupPathResponse(path=[GroupResponse.from_entity(group) for group in path])
    except (WordtreeError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"get path of group {group_id}", e) from e


@router.post("", response_model=GroupMutationResponse, status_code=status.HTTP_201_CREATED)
def create_group(
    request: GroupCreateRequest,
    current_user: CurrentUser,
    use_case: GroupUseCase = Depends(inject_use_case(container.group_use_case)),
) -> GroupMutationResponse:
    try:
        group = use_case.create_group(
            parent_id=request.parent_id,
            title=request.title,
            user_id=current_user.user_id,
        )
        return GroupMutationResponse(
            success=True,
            message="Group created successfully",
            group=GroupResponse.from_entity(group),
        )
    except (WordtreeError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("create group", e) from e


@router.put("/{group_id}", response_model=GroupMutationResponse)
def update_group(
    group_id: int,
    request: GroupUpdateRequest,
    current_user: CurrentUser,
    use_case: GroupUseCase = Depends(inject_use_case(container.group_use_case)),
) -> GroupMutationResponse:
    """
    Rename and/or move a group.

    Moving a group into itself or any of its descendants is rejected.
    """
    try:
        group = use_case.update_group(
            group_id=group_id,
            user_id=current_user.user_id,
            title=request.title,
            parent_id=request.parent_id,
        )
        return GroupMutationResponse(
            success=True,
            message="Group updated successfully",
            group=GroupResponse.from_entity(group),
        )
    except (WordtreeError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"update group {group_id}", e) from e


@router.delete("/{group_id}", response_model=GroupDeleteResponse)
def delete_group(
    group_id: int,
    current_user: CurrentUser,
    use_case: GroupUseCase = Depends(inject_use_case(container.group_use_case)),
) -> GroupDeleteResponse:
    """Delete a group together with every nested group and card."""
    try:
        deleted = use_case.delete_group(group_id, current_user.user_id)
        return GroupDeleteResponse(
            success=True,
            message="Group deleted successfully",
            groups_deleted=deleted,
        )
    except (WordtreeError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"delete group {group_id}", e) from e


@router.post("/{group_id}/invite_code", response_model=GroupMutationResponse)
def regenerate_invite_code(
    group_id: int,
    current_user: CurrentUser,
    use_case: GroupUseCase = Depends(inject_use_case(container.group_use_case)),
) -> GroupMutationResponse:
    """Issue a new invite code for a group. The previous code stops working."""
    try:
        group = use_case.regenerate_invite_code(group_id, current_user.user_id)
        return GroupMutationResponse(
            success=True,
            message="Invite code regenerated",
            group=GroupResponse.from_entity(group),
        )
    except (WordtreeError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"regenerate invite code of group {group_id}", e) from e
