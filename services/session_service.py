"""Session identity: opaque tokens that partition meal ownership"""

import logging
import uuid
from typing import Optional, Tuple

logger = logging.getLogger("dailydiet.sessions")


class SessionService:
    @staticmethod
    def new_session_id() -> str:
        """Generate a fresh opaque session token"""
        return str(uuid.uuid4())

    @staticmethod
    def resolve(session_id: Optional[str]) -> Tuple[str, bool]:
        """
        Return the caller's session token, issuing one if it has none.

        Returns a tuple of (session_id, issued_flag); when the flag is set the
        caller must send the token back as a cookie.
        """
        if session_id:
            return session_id, False

        issued = SessionService.new_session_id()
        logger.info(f"session_issued session_id={issued}")
        return issued, True
