"""Accounts: registration, password login and token exchange."""

import structlog

from wordtree.application.common.unit_of_work import UnitOfWork
from wordtree.application.content.services import RootProvisioningService
from wordtree.application.identity.auth_context import AuthContext
from wordtree.application.identity.protocols import (
    PasswordHasherProtocol,
    TokenIssuerProtocol,
    UserRepositoryProtocol,
)
from wordtree.application.identity.tokens import TokenPair
from wordtree.domain.common.value_objects.ids import UserId
from wordtree.domain.identity.entities.user import User, normalize_email
from wordtree.domain.identity.exceptions import (
    AuthenticationFailedError,
    RegistrationDisabledError,
)
from wordtree.feature_flags import is_user_registrations_enabled

logger = structlog.get_logger(__name__)


class AccountUseCase:
    """
    Issues tokens to accounts and turns access tokens back into an ``AuthContext``.

    Registration is the only write: the user row, the root group and the
    root ownership row are committed together, so every account that can
    log in already owns a tree.
    """

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_hasher: PasswordHasherProtocol,
        token_issuer: TokenIssuerProtocol,
        root_provisioning_service: RootProvisioningService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer
        self.root_provisioning_service = root_provisioning_service
        self.unit_of_work = unit_of_work

    def register(self, email: str, password: str) -> TokenPair:
        """
        Create an account with its root group and log it in.

        Raises:
            RegistrationDisabledError: If registrations are switched off
            EmailTakenError: If the email already has an account
            ValidationError: If the email is malformed
        """
        if not is_user_registrations_enabled():
            raise RegistrationDisabledError

        user = User.register(email, self.password_hasher.hash(password))
        with self.unit_of_work:
            user = self.user_repository.add(user)
            root = self.root_provisioning_service.provision_root(user.id)
            self.unit_of_work.commit()

        logger.info("user_registered", user_id=user.id.value, root_id=root.id.value)
        return self.token_issuer.issue(user.id.value)

    def log_in(self, email: str, password: str) -> TokenPair:
        """
        Exchange an email and password for a token pair.

        Unknown emails and wrong passwords fail the same way and take the
        same time.

        Raises:
            AuthenticationFailedError: If the credentials do not match an account
        """
        user = self.user_repository.find_by_email(normalize_email(email))
        if user is None:
            self.password_hasher.verify_dummy(password)
            raise AuthenticationFailedError
        if not self.password_hasher.verify(password, user.password_hash):
            raise AuthenticationFailedError

        logger.info("user_logged_in", user_id=user.id.value)
        return self.token_issuer.issue(user.id.value)

    def refresh(self, refresh_token: str) -> TokenPair:
        """Raises AuthenticationFailedError unless the token is a live refresh token."""
        user = self._user_for(self.token_issuer.read_refresh(refresh_token))
        if user is None:
            raise AuthenticationFailedError("Invalid or expired refresh token")
        return self.token_issuer.issue(user.id.value)

    def authenticate(self, access_token: str) -> AuthContext:
        """Raises AuthenticationFailedError unless the token is a live access token."""
        user = self._user_for(self.token_issuer.read_access(access_token))
        if user is None:
            raise AuthenticationFailedError("Could not validate credentials")
        return AuthContext(user_id=user.id.value, email=user.email)

    def _user_for(self, user_id: int | None) -> User | None:
        # Tokens outlive accounts, so a valid signature is not enough
        if user_id is None:
            return None
        return self.user_repository.find_by_id(UserId(user_id))
