"""
Unit of Work interface.

The Unit of Work groups the writes of one business transaction so they are
committed together or not at all.

Example:
    def create_card(self, ...) -> Card:
        with self.unit_of_work:
            card = self.card_repository.save(Card.create(...))
            self.unit_of_work.commit()
        return card
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    Infrastructure layer provides concrete implementations
    (e.g., SQLAlchemyUnitOfWork).
    """

    @abstractmethod
    def commit(self) -> None:
        """Commit the current transaction."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Rollback the current transaction."""
        raise NotImplementedError

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly).
        """
        if exc_type is not None:
            self.rollback()
