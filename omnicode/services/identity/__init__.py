"""Identity verifier factory."""

from omnicode.core.config import settings
from omnicode.services.identity.base import BaseIdentityVerifier


def get_identity_verifier() -> BaseIdentityVerifier:
    """Returns the configured identity verifier."""
    if settings.identity_provider == "firebase":
        from omnicode.services.identity.firebase import FirebaseIdentityVerifier
        return FirebaseIdentityVerifier()
    else:
        raise ValueError(f"Unknown identity provider: {settings.identity_provider}")
