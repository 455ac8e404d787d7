"""Tests for cards API endpoints."""

from collections.abc import Callable

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from wordtree import models


@pytest.fixture
def animals(create_group: Callable[..., models.Group], test_root: models.Group) -> models.Group:
    return create_group("Animals", test_root)


@pytest.fixture
def cat(create_card: Callable[..., models.Card], animals: models.Group) -> models.Card:
    return create_card("cat", "kot", animals)


class TestCreateCard:
    """Test suite for POST /cards endpoint."""

    def test_create_card(
        self, client: TestClient, db_session: Session, animals: models.Group
    ) -> None:
        response = client.post(
            "/api/v1/cards",
            json={"group_id": animals.id, "word": "horse", "translation": "koń"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["success"] is True
        assert data["card"]["group_id"] == animals.id

        db_card = db_session.get(models.Card, data["card"]["id"])
        assert db_card is not None
        assert db_card.word == "horse"
        assert db_card.translation == "koń"

    def test_create_card_in_foreign_group(
        self, client: TestClient, other_root: models.Group
    ) -> None:
        response = client.post(
            "/api/v1/cards",
            json={"group_id": other_root.id, "word": "horse", "translation": "koń"},
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_create_card_missing_word(self, client: TestClient, animals: models.Group) -> None:
        response = client.post(
            "/api/v1/cards", json={"group_id": animals.id, "translation": "koń"}
        )
        assert response.status_code == 422


class TestListCards:
    """Test suite for GET /cards/group/:id endpoint."""

    def test_list_cards(
        self,
        client: TestClient,
        create_group: Callable[..., models.Group],
        animals: models.Group,
        cat: models.Card,
    ) -> None:
        create_group("Cats", animals)

        response = client.get(f"/api/v1/cards/group/{animals.id}")

        assert response.status_code == status.HTTP_200_OK
        cards = response.json()["cards"]
        assert [c["id"] for c in cards] == [cat.id]

    def test_list_cards_of_foreign_group(
        self,
        client: TestClient,
        act_as: Callable[[models.User], None],
        other_user_with_root: tuple[models.User, models.Group],
        animals: models.Group,
    ) -> None:
        act_as(other_user_with_root[0])
        response = client.get(f"/api/v1/cards/group/{animals.id}")
        assert response.status_code == status.HTTP_403_FORBIDDEN


class TestUpdateCard:
    """Test suite for PUT /cards/:id endpoint."""

    def test_update_translation(self, client: TestClient, cat: models.Card) -> None:
        response = client.put(f"/api/v1/cards/{cat.id}", json={"translation": "kotek"})

        assert response.status_code == status.HTTP_200_OK
        card = response.json()["card"]
        assert card["word"] == "cat"
        assert card["translation"] == "kotek"

    def test_move_card(
        self,
        client: TestClient,
        create_group: Callable[..., models.Group],
        test_root: models.Group,
        cat: models.Card,
    ) -> None:
        pets = create_group("Pets", test_root)

        response = client.put(f"/api/v1/cards/{cat.id}", json={"group_id": pets.id})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["card"]["group_id"] == pets.id

    def test_move_card_into_foreign_group(
        self, client: TestClient, other_root: models.Group, cat: models.Card
    ) -> None:
        response = client.put(f"/api/v1/cards/{cat.id}", json={"group_id": other_root.id})
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_update_missing_card(self, client: TestClient) -> None:
        response = client.put("/api/v1/cards/99999", json={"word": "ghost"})
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteCard:
    """Test suite for DELETE /cards/:id endpoint."""

    def test_delete_card(self, client: TestClient, db_session: Session, cat: models.Card) -> None:
        card_id = cat.id

        response = client.delete(f"/api/v1/cards/{card_id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        db_session.expire_all()
        assert db_session.query(models.Card).filter_by(id=card_id).first() is None

    def test_delete_foreign_card(
        self,
        client: TestClient,
        act_as: Callable[[models.User], None],
        other_user_with_root: tuple[models.User, models.Group],
        cat: models.Card,
    ) -> None:
        act_as(other_user_with_root[0])
        response = client.delete(f"/api/v1/cards/{cat.id}")
        assert response.status_code == status.HTTP_403_FORBIDDEN
