import logging
import socket

logger = logging.getLogger(__name__)

DEFAULT_HOSTNAME = "google.com"


class Reachability:
    """Best-effort internet connectivity check.

    Resolving a well-known host name only shows that DNS answers, not that a
    later request will succeed. Inject a platform reachability probe into
    ``WebClient`` where that matters.
    """

    def __init__(self, hostname: str = DEFAULT_HOSTNAME) -> None:
        self.hostname = hostname

    def is_connected(self) -> bool:
        try:
            socket.getaddrinfo(self.hostname, None)
        except (OSError, UnicodeError) as error:
            logger.debug("Could not resolve %s: %s", self.hostname, error)
            return False

        return True
