from wordtree.domain.common.value_objects.ids import UserId
from wordtree.domain.identity.entities.user import User
from wordtree.models import User as UserORM


class UserMapper:
    """Maps account rows to ``User`` entities and back."""

    def to_domain(self, orm_model: UserORM) -> User:
        return User(
            id=UserId(orm_model.id),
            email=orm_model.email,
            password_hash=orm_model.password_hash,
        )

    def to_orm(self, user: User) -> UserORM:
        """Build a new row; accounts are never updated in place."""
        return UserORM(email=user.email, password_hash=user.password_hash)
