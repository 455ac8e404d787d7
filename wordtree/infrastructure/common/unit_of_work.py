"""SQLAlchemy implementation of the unit of work."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wordtree.application.common.unit_of_work import UnitOfWork
from wordtree.exceptions import StorageError


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Commits or rolls back the request-scoped session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            raise StorageError("commit") from e

    def rollback(self) -> None:
        self.db.rollback()
