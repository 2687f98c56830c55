"""One-time fallback to ``index.php/`` URLs.

Sites without pretty permalinks only route the REST API through the front
controller (``https://site/index.php/wp-json/...``). On the first failed
call the session is moved to that form and the call is retried once. The
rewrite is permanent, and because a URL that already contains ``index.php``
is never rewritten, a session performs at most one rewrite in its lifetime.

The retry covers every verb, POST and DELETE included. A non-idempotent
request that reached the server before failing may therefore be applied
twice.
"""

from __future__ import annotations

from wordpress_sdk.output import get_output
from wordpress_sdk.session import Session

FRONT_CONTROLLER = "index.php"


class FrontControllerFallback:
    """Decides whether a failed call may be retried, rewriting the session if so."""

    segment = FRONT_CONTROLLER

    def exhausted(self, session: Session) -> bool:
        """Return ``True`` once the session already uses the fallback URL."""
        return self.segment in session.server

    def try_rewrite(self, session: Session) -> bool:
        """Adopt the fallback URL unless it is already in use.

        Returns:
            ``True`` if the session was rewritten and the call may be
            retried once, ``False`` if retries are exhausted.
        """
        if self.exhausted(session):
            return False

        new_server = session.server.rstrip("/") + f"/{self.segment}/"
        get_output().debug(f"Retrying via front controller: {session.server} -> {new_server}")
        session.rebase(new_server)
        return True
