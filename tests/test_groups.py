"""Tests for groups API endpoints."""

from collections.abc import Callable

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wordtree import models
from wordtree.exceptions import StorageError
from wordtree.infrastructure.content.repositories.card_repository import CardRepository


@pytest.fixture
def animals(
    create_group: Callable[..., models.Group],
    create_card: Callable[..., models.Card],
    test_root: models.Group,
) -> models.Group:
    """R1 > Animals > [cat]."""
    group = create_group("Animals", test_root)
    create_card("cat", "kot", group)
    return group


class TestReadGroups:
    """Test suite for GET /groups endpoints."""

    def test_get_root(self, client: TestClient, test_root: models.Group) -> None:
        response = client.get("/api/v1/groups/root")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == test_root.id
        assert data["parent_id"] is None
        assert data["title"] == "root"

    def test_get_group(self, client: TestClient, animals: models.Group) -> None:
        response = client.get(f"/api/v1/groups/{animals.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["invite_code"] == animals.invite_code

    def test_get_missing_group(self, client: TestClient) -> None:
        response = client.get("/api/v1/groups/99999")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_get_foreign_group(
        self,
        client: TestClient,
        act_as: Callable[[models.User], None],
        other_user_with_root: tuple[models.User, models.Group],
        animals: models.Group,
    ) -> None:
        act_as(other_user_with_root[0])
        response = client.get(f"/api/v1/groups/{animals.id}")
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_list_items_cards_first(
        self,
        client: TestClient,
        create_group: Callable[..., models.Group],
        animals: models.Group,
    ) -> None:
        cats = create_group("Cats", animals)

        response = client.get(f"/api/v1/groups/{animals.id}/items")

        assert response.status_code == status.HTTP_200_OK
        items = response.json()["items"]
        assert [item["type"] for item in items] == ["card", "group"]
        assert items[0]["word"] == "cat"
        assert items[1]["id"] == cats.id

    def test_list_items_of_missing_group_is_forbidden(self, client: TestClient) -> None:
        response = client.get("/api/v1/groups/99999/items")
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_path_to_root(
        self, client: TestClient, animals: models.Group, test_root: models.Group
    ) -> None:
        response = client.get(f"/api/v1/groups/{animals.id}/path")

        assert response.status_code == status.HTTP_200_OK
        path = response.json()["path"]
        assert [g["id"] for g in path] == [animals.id, test_root.id]
        assert path[-1]["parent_id"] is None

    def test_full_tree(
        self,
        client: TestClient,
        create_group: Callable[..., models.Group],
        test_root: models.Group,
        animals: models.Group,
    ) -> None:
        food = create_group("Food", test_root)
        cats = create_group("Cats", animals)

        response = client.get("/api/v1/groups/tree")

        assert response.status_code == status.HTTP_200_OK
        tree = response.json()
        assert tree["group"]["id"] == test_root.id
        assert [c["group"]["id"] for c in tree["children"]] == [animals.id, food.id]
        assert [c["group"]["id"] for c in tree["children"][0]["children"]] == [cats.id]

    def test_requires_authentication(self, anonymous_client: TestClient) -> None:
        response = anonymous_client.get("/api/v1/groups/root")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestCreateGroup:
    """Test suite for POST /groups endpoint."""

    def test_create_group(
        self, client: TestClient, db_session: Session, test_root: models.Group
    ) -> None:
        response = client.post(
            "/api/v1/groups", json={"parent_id": test_root.id, "title": "Animals"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["success"] is True
        assert data["group"]["parent_id"] == test_root.id

        db_group = db_session.get(models.Group, data["group"]["id"])
        assert db_group is not None
        assert db_group.title == "Animals"

    def test_create_without_parent(self, client: TestClient) -> None:
        response = client.post("/api/v1/groups", json={"title": "Loose"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_blank_title(self, client: TestClient, test_root: models.Group) -> None:
        response = client.post("/api/v1/groups", json={"parent_id": test_root.id, "title": "  "})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_empty_title(self, client: TestClient, test_root: models.Group) -> None:
        response = client.post("/api/v1/groups", json={"parent_id": test_root.id, "title": ""})
        assert response.status_code == 422

    def test_create_in_foreign_tree(self, client: TestClient, other_root: models.Group) -> None:
        response = client.post(
            "/api/v1/groups", json={"parent_id": other_root.id, "title": "Intruder"}
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN


class TestUpdateGroup:
    """Test suite for PUT /groups/:id endpoint."""

    def test_rename_and_move(
        self,
        client: TestClient,
        create_group: Callable[..., models.Group],
        test_root: models.Group,
        animals: models.Group,
    ) -> None:
        target = create_group("Target", test_root)

        response = client.put(
            f"/api/v1/groups/{animals.id}", json={"title": "Pets", "parent_id": target.id}
        )

        assert response.status_code == status.HTTP_200_OK
        group = response.json()["group"]
        assert group["title"] == "Pets"
        assert group["parent_id"] == target.id

    def test_self_move(self, client: TestClient, animals: models.Group) -> None:
        response = client.put(
            f"/api/v1/groups/{animals.id}", json={"title": "new title", "parent_id": animals.id}
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_move_into_descendant(
        self,
        client: TestClient,
        db_session: Session,
        create_group: Callable[..., models.Group],
        test_root: models.Group,
        animals: models.Group,
    ) -> None:
        cats = create_group("Cats", animals)

        response = client.put(f"/api/v1/groups/{animals.id}", json={"parent_id": cats.id})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        db_session.expire_all()
        assert db_session.get(models.Group, animals.id).parent_id == test_root.id

    def test_move_root(
        self, client: TestClient, test_root: models.Group, animals: models.Group
    ) -> None:
        response = client.put(f"/api/v1/groups/{test_root.id}", json={"parent_id": animals.id})
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestDeleteGroup:
    """Test suite for DELETE /groups/:id endpoint."""

    def test_delete_cascades(
        self,
        client: TestClient,
        db_session: Session,
        create_group: Callable[..., models.Group],
        create_card: Callable[..., models.Card],
        animals: models.Group,
    ) -> None:
        cats = create_group("Cats", animals)
        create_card("lion", "lew", cats)

        response = client.delete(f"/api/v1/groups/{animals.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["groups_deleted"] == 2
        db_session.expire_all()
        assert db_session.query(models.Group).filter_by(id=animals.id).first() is None
        assert db_session.query(models.Group).filter_by(id=cats.id).first() is None
        assert db_session.query(models.Card).count() == 0

    def test_delete_root_rejected(self, client: TestClient, test_root: models.Group) -> None:
        response = client.delete(f"/api/v1/groups/{test_root.id}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert client.get("/api/v1/groups/root").json()["id"] == test_root.id

    def test_delete_foreign_group(
        self,
        client: TestClient,
        act_as: Callable[[models.User], None],
        other_user_with_root: tuple[models.User, models.Group],
        animals: models.Group,
    ) -> None:
        act_as(other_user_with_root[0])
        response = client.delete(f"/api/v1/groups/{animals.id}")
        assert response.status_code == status.HTTP_403_FORBIDDEN


class TestCopyGroup:
    """Test suite for POST /groups/copy endpoint."""

    def test_copy_into_other_users_root(
        self,
        client: TestClient,
        act_as: Callable[[models.User], None],
        other_user_with_root: tuple[models.User, models.Group],
        animals: models.Group,
    ) -> None:
        other_user, other_root = other_user_with_root
        act_as(other_user)

        response = client.post(
            "/api/v1/groups/copy",
            json={"invite_code": animals.invite_code, "parent_id": other_root.id},
        )

        assert response.status_code == status.HTTP_201_CREATED
        copy = response.json()["group"]
        assert copy["parent_id"] == other_root.id
        assert copy["title"] == "Animals"
        assert copy["invite_code"] != animals.invite_code
        assert copy["id"] != animals.id

        items = client.get(f"/api/v1/groups/{copy['id']}/items").json()["items"]
        assert [(i["word"], i["translation"]) for i in items] == [("cat", "kot")]

    def test_unknown_invite_code(self, client: TestClient, test_root: models.Group) -> None:
        response = client.post(
            "/api/v1/groups/copy", json={"invite_code": "nope", "parent_id": test_root.id}
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_copy_into_foreign_destination(
        self, client: TestClient, other_root: models.Group, animals: models.Group
    ) -> None:
        response = client.post(
            "/api/v1/groups/copy",
            json={"invite_code": animals.invite_code, "parent_id": other_root.id},
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_copy_into_own_subtree(
        self,
        client: TestClient,
        create_group: Callable[..., models.Group],
        animals: models.Group,
    ) -> None:
        cats = create_group("Cats", animals)
        response = client.post(
            "/api/v1/groups/copy", json={"invite_code": animals.invite_code, "parent_id": cats.id}
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_failed_copy_leaves_nothing_behind(
        self,
        client: TestClient,
        db_session: Session,
        monkeypatch: pytest.MonkeyPatch,
        test_root: models.Group,
        animals: models.Group,
    ) -> None:
        groups_before = db_session.query(models.Group).count()
        cards_before = db_session.query(models.Card).count()

        def failing_save(self: CardRepository, card: object) -> None:
            raise StorageError("save_card")

        monkeypatch.setattr(CardRepository, "save", failing_save)

        response = client.post(
            "/api/v1/groups/copy",
            json={"invite_code": animals.invite_code, "parent_id": test_root.id},
        )

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert db_session.query(models.Group).count() == groups_before
        assert db_session.query(models.Card).count() == cards_before


class TestRegenerateInviteCode:
    """Test suite for POST /groups/:id/invite_code endpoint."""

    def test_old_code_stops_working(
        self, client: TestClient, test_root: models.Group, animals: models.Group
    ) -> None:
        old_code = animals.invite_code

        response = client.post(f"/api/v1/groups/{animals.id}/invite_code")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["group"]["invite_code"] != old_code
        copy = client.post(
            "/api/v1/groups/copy", json={"invite_code": old_code, "parent_id": test_root.id}
        )
        assert copy.status_code == status.HTTP_404_NOT_FOUND


def test_health(anonymous_client: TestClient) -> None:
    response = anonymous_client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "healthy"


def test_storage_failure_on_create_is_reported_as_retryable(
    client: TestClient,
    db_session: Session,
    monkeypatch: pytest.MonkeyPatch,
    test_root: models.Group,
) -> None:
    groups_before = db_session.query(models.Group).count()

    def failing_flush(*args: object, **kwargs: object) -> None:
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(db_session, "flush", failing_flush)

    response = client.post("/api/v1/groups", json={"title": "Birds", "parent_id": test_root.id})

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json()["detail"] == "Storage temporarily unavailable, please retry"
    assert db_session.query(models.Group).count() == groups_before
