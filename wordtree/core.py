from datetime import timedelta

from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from wordtree.application.content.services import (
    OwnershipResolver,
    RootProvisioningService,
    TreeCopier,
    TreeLimits,
    TreeReader,
)
from wordtree.application.content.use_cases.card_use_case import CardUseCase
from wordtree.application.content.use_cases.group_use_case import GroupUseCase
from wordtree.application.content.use_cases.tree_query_use_case import TreeQueryUseCase
from wordtree.application.identity.use_cases.account_use_case import AccountUseCase
from wordtree.config import get_settings
from wordtree.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from wordtree.infrastructure.content.repositories import (
    CardRepository,
    GroupRepository,
    RootOwnershipRepository,
)
from wordtree.infrastructure.identity.repositories.user_repository import UserRepository
from wordtree.infrastructure.identity.services import JwtTokenIssuer, PepperedPasswordHasher

settings = get_settings()


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Provided per request by inject_use_case
    db = providers.Dependency(instance_of=Session)

    unit_of_work = providers.Factory(SQLAlchemyUnitOfWork, db=db)

    # Content repositories
    group_repository = providers.Factory(GroupRepository, db=db)
    card_repository = providers.Factory(CardRepository, db=db)
    root_ownership_repository = providers.Factory(RootOwnershipRepository, db=db)

    # Identity repositories and services
    user_repository = providers.Factory(UserRepository, db=db)
    password_hasher = providers.Singleton(PepperedPasswordHasher, pepper=settings.PASSWORD_PEPPER)
    token_issuer = providers.Singleton(
        JwtTokenIssuer,
        secret_key=settings.SECRET_KEY,
        refresh_secret_key=settings.REFRESH_TOKEN_SECRET_KEY,
        access_ttl=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        refresh_ttl=timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS),
    )

    # Content services
    tree_limits = providers.Singleton(
        TreeLimits,
        max_depth=settings.TREE_MAX_DEPTH,
        max_nodes=settings.TREE_MAX_NODES,
    )
    ownership_resolver = providers.Factory(
        OwnershipResolver,
        group_repository=group_repository,
        ownership_repository=root_ownership_repository,
        limits=tree_limits,
    )
    tree_reader = providers.Factory(
        TreeReader,
        group_repository=group_repository,
        card_repository=card_repository,
        limits=tree_limits,
    )
    tree_copier = providers.Factory(
        TreeCopier,
        tree_reader=tree_reader,
        group_repository=group_repository,
        card_repository=card_repository,
        limits=tree_limits,
    )
    root_provisioning_service = providers.Factory(
        RootProvisioningService,
        group_repository=group_repository,
        ownership_repository=root_ownership_repository,
    )

    # Content use cases
    tree_query_use_case = providers.Factory(
        TreeQueryUseCase,
        group_repository=group_repository,
        ownership_repository=root_ownership_repository,
        ownership_resolver=ownership_resolver,
        tree_reader=tree_reader,
    )
    group_use_case = providers.Factory(
        GroupUseCase,
        group_repository=group_repository,
        card_repository=card_repository,
        ownership_resolver=ownership_resolver,
        tree_reader=tree_reader,
        tree_copier=tree_copier,
        unit_of_work=unit_of_work,
        limits=tree_limits,
    )
    card_use_case = providers.Factory(
        CardUseCase,
        card_repository=card_repository,
        ownership_resolver=ownership_resolver,
        tree_reader=tree_reader,
        unit_of_work=unit_of_work,
    )

    # Identity use cases
    account_use_case = providers.Factory(
        AccountUseCase,
        user_repository=user_repository,
        password_hasher=password_hasher,
        token_issuer=token_issuer,
        root_provisioning_service=root_provisioning_service,
        unit_of_work=unit_of_work,
    )


container = Container()
