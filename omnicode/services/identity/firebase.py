"""Firebase Authentication ID token verifier."""

import asyncio
import logging

from firebase_admin import auth
from firebase_admin.exceptions import FirebaseError

from omnicode.core.firebase import get_firebase_app
from omnicode.services.identity.base import BaseIdentityVerifier, InvalidTokenError

logger = logging.getLogger(__name__)


class FirebaseIdentityVerifier(BaseIdentityVerifier):
    def __init__(self, check_revoked: bool = False):
        self.check_revoked = check_revoked

    def _verify_sync(self, token: str) -> dict:
        return auth.verify_id_token(token, app=get_firebase_app(), check_revoked=self.check_revoked)

    async def verify(self, token: str) -> str:
        try:
            # verify_id_token may fetch signing certificates over the network
            decoded = await asyncio.to_thread(self._verify_sync, token)
        except (ValueError, FirebaseError) as e:
            logger.debug(f"ID token rejected: {e}")
            raise InvalidTokenError(str(e)) from e

        uid = decoded.get("uid")
        if not uid:
            raise InvalidTokenError("Token has no subject")
        return uid
