"""SQLAlchemy store for accounts."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from wordtree.domain.common.value_objects.ids import UserId
from wordtree.domain.identity.entities.user import User
from wordtree.domain.identity.exceptions import EmailTakenError
from wordtree.exceptions import StorageError
from wordtree.infrastructure.identity.mappers.user_mapper import UserMapper
from wordtree.models import User as UserORM


class UserRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        try:
            orm_model = self.db.get(UserORM, user_id.value)
        except SQLAlchemyError as e:
            raise StorageError("find_user") from e
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_email(self, email: str) -> User | None:
        """Look up an account by an already normalized email."""
        stmt = select(UserORM).where(UserORM.email == email)
        try:
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError("find_user") from e
        return self.mapper.to_domain(orm_model) if orm_model else None

    def add(self, user: User) -> User:
        """
        Insert a new account and flush so its id is assigned.

        Raises:
            EmailTakenError: If the email is already registered
        """
        orm_model = self.mapper.to_orm(user)
        try:
            self.db.add(orm_model)
            self.db.flush()
        except IntegrityError as e:
            # email is the only unique column besides the primary key
            raise EmailTakenError(user.email) from e
        except SQLAlchemyError as e:
            raise StorageError("add_user") from e
        return self.mapper.to_domain(orm_model)
