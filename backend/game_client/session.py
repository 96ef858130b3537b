import logging
import threading
from typing import Callable, Optional

from .notifier import RelayNotifier, SessionOutcome

logger = logging.getLogger(__name__)

PLAYING = 'playing'
GAME_OVER = 'gameOver'
CLEARED = 'cleared'


def _noop():
    pass


class GameSession:
    """One round of the game as seen by the player's client.

    Screen callbacks run synchronously after the notification has been
    dispatched; they never wait on, or depend on, the relay's answer.
    """

    def __init__(
        self,
        user_id: str,
        notifier: RelayNotifier,
        show_game_over_screen: Callable[[], None] = _noop,
        show_clear_screen: Callable[[], None] = _noop,
    ):
        self.user_id = user_id
        self.notifier = notifier
        self.show_game_over_screen = show_game_over_screen
        self.show_clear_screen = show_clear_screen
        self.score = 0
        self.is_game_over = False
        self.game_state = PLAYING

    def add_points(self, points) -> None:
        if self.game_state != PLAYING:
            return
        self.score += points

    def game_over(self) -> Optional[threading.Thread]:
        self.is_game_over = True
        self.game_state = GAME_OVER
        # Losing forfeits the round's score
        self.score = 0

        task = self._dispatch(SessionOutcome(self.user_id, 0, True))
        self.show_game_over_screen()
        return task

    def clear(self) -> Optional[threading.Thread]:
        self.game_state = CLEARED
        task = self._dispatch(SessionOutcome(self.user_id, self.score, False))
        self.show_clear_screen()
        return task

    def _dispatch(self, outcome: SessionOutcome) -> Optional[threading.Thread]:
        try:
            return self.notifier.dispatch(outcome)
        except Exception:
            logger.exception(f"[notify] user={outcome.user_id} dispatch failed")
            return None
