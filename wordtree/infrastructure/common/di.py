from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from wordtree.core import container
from wordtree.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    Overrides ``container.db`` with the request-scoped session while the
    use case is built.
    """

    def dependency(db: DatabaseSession) -> T:
        try:
            container.db.override(db)
            return provider()
        finally:
            container.db.reset_override()

    return dependency
