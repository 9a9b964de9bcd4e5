"""Abstract identity verifier interface."""

from abc import ABC, abstractmethod


class InvalidTokenError(Exception):
    """The bearer token could not be verified."""


class BaseIdentityVerifier(ABC):
    @abstractmethod
    async def verify(self, token: str) -> str:
        """Verify an ID token and return the uid it was issued to.

        Raises InvalidTokenError when the token is malformed, expired, revoked
        or otherwise rejected by the identity provider.
        """
        ...
