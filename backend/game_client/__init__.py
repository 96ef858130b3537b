"""Client-side game session and the best-effort relay notifier."""

from .notifier import RelayNotifier, SessionOutcome
from .session import GameSession

__all__ = ['GameSession', 'RelayNotifier', 'SessionOutcome']
