import logging
import threading
from dataclasses import dataclass

import httpx

logger = logging.getLogger(__name__)

NOTIFY_PATH = '/api/line-notify'


@dataclass(frozen=True)
class SessionOutcome:
    user_id: str
    score: float
    is_game_over: bool

    def to_payload(self):
        return {
            'userId': self.user_id,
            'score': self.score,
            'isGameOver': self.is_game_over,
        }


class RelayNotifier:
    """Posts session outcomes to the notify relay.

    Delivery is best effort: failures are logged and never raised, and
    nothing is retried.
    """

    def __init__(self, base_url: str, timeout: float = 10.0, transport: httpx.BaseTransport | None = None):
        self._http = httpx.Client(base_url=base_url.rstrip('/'), timeout=timeout, transport=transport)

    def send(self, outcome: SessionOutcome) -> bool:
        try:
            response = self._http.post(NOTIFY_PATH, json=outcome.to_payload())
        except httpx.HTTPError as exc:
            logger.error(f"[notify] user={outcome.user_id} request error: {exc}")
            return False
        except Exception:
            logger.exception(f"[notify] user={outcome.user_id} unexpected error")
            return False
        if not response.is_success:
            logger.error(f"[notify] user={outcome.user_id} relay responded {response.status_code}")
            return False
        return True

    def dispatch(self, outcome: SessionOutcome) -> threading.Thread:
        """Send in a daemon thread; the caller does not wait for the result."""
        worker = threading.Thread(
            target=self.send,
            args=(outcome,),
            name=f"relay-notify-{outcome.user_id}",
            daemon=True,
        )
        worker.start()
        return worker

    def close(self) -> None:
        self._http.close()
