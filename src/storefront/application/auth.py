"""Admin gate.

Admin operations ask an AuthProvider whether the caller may proceed. The
only provider today compares a shared secret; swapping in a real scheme
means adding another provider, not touching the handlers.
"""

from __future__ import annotations

import hmac
from abc import ABC, abstractmethod

from storefront.domain.exceptions import AuthenticationError


class AuthProvider(ABC):

    @abstractmethod
    def verify(self, password: object) -> None:
        """Raise AuthenticationError unless *password* grants admin access."""


class SharedSecretAuthProvider(AuthProvider):
    """Grants access to whoever presents the one configured password."""

    def __init__(self, secret: str) -> None:
        self._secret = secret

    def verify(self, password: object) -> None:
        if not isinstance(password, str) or not hmac.compare_digest(
            password.encode("utf-8"), self._secret.encode("utf-8")
        ):
            raise AuthenticationError("Wrong admin password")
