"""Pydantic schemas for groups and tree views."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from wordtree.domain.content.entities import Card, Group, GroupItem, TreeNode


class GroupResponse(BaseModel):
    """A group of the content tree."""

    id: int = Field(..., description="Group ID")
    title: str = Field(..., description="Group title")
    invite_code: str = Field(..., description="Code other users can copy this group with")
    parent_id: int | None = Field(None, description="Parent group ID, null for a root")

    @classmethod
    def from_entity(cls, group: Group) -> "GroupResponse":
        return cls(
            id=group.id.value,
            title=group.title,
            invite_code=group.invite_code.value,
            parent_id=group.parent_id.value if group.parent_id else None,
        )


class CardItemResponse(BaseModel):
    """Card entry of a group listing."""

    type: Literal["card"] = "card"
    id: int
    word: str
    translation: str
    group_id: int


class SubgroupItemResponse(BaseModel):
    """Group entry of a group listing."""

    type: Literal["group"] = "group"
    id: int
    title: str
    invite_code: str
    parent_id: int | None


GroupItemResponse = Annotated[
    CardItemResponse | SubgroupItemResponse, Field(discriminator="type")
]


def item_to_response(item: GroupItem) -> CardItemResponse | SubgroupItemResponse:
    if isinstance(item, Card):
        return CardItemResponse(
            id=item.id.value,
            word=item.word,
            translation=item.translation,
            group_id=item.group_id.value,
        )
    return SubgroupItemResponse(
        id=item.id.value,
        title=item.title,
        invite_code=item.invite_code.value,
        parent_id=item.parent_id.value if item.parent_id else None,
    )


class GroupItemsResponse(BaseModel):
    """Direct children of a group: cards first, then nested groups."""

    items: list[GroupItemResponse]


class GroupPathResponse(BaseModel):
    """Ancestor chain of a group, nearest first, ending at the root."""

    path: list[GroupResponse]


class TreeNodeResponse(BaseModel):
    """Recursive view of a group and its nested groups."""

    group: GroupResponse
    children: list["TreeNodeResponse"] = Field(default_factory=list)

    @classmethod
    def from_tree(cls, tree: TreeNode) -> "TreeNodeResponse":
        """Build the response without recursion so deep trees stay safe."""
        response = cls(group=GroupResponse.from_entity(tree.root))
        stack = [(tree, response)]
        while stack:
            node, node_response = stack.pop()
            for child in node.children:
                child_response = cls(group=GroupResponse.from_entity(child.root))
                node_response.children.append(child_response)
                stack.append((child, child_response))
        return response


class GroupCreateRequest(BaseModel):
    """Request body for creating a group."""

    parent_id: int | None = Field(None, description="ID of the parent group")
    title: str = Field(..., min_length=1, max_length=255, description="Group title")


class GroupUpdateRequest(BaseModel):
    """Request body for renaming and/or moving a group."""

    title: str | None = Field(None, min_length=1, max_length=255, description="New title")
    parent_id: int | None = Field(None, description="Move the group under this parent")


class GroupCopyRequest(BaseModel):
    """Request body for copying a shared group into the caller's tree."""

    invite_code: str = Field(..., min_length=1, max_length=64, description="Source invite code")
    parent_id: int = Field(..., description="ID of the destination group")


class GroupMutationResponse(BaseModel):
    """Response after creating, updating or copying a group."""

    success: bool
    message: str
    group: GroupResponse


class GroupDeleteResponse(BaseModel):
    """Response after deleting a group subtree."""

    success: bool
    message: str
    groups_deleted: int
