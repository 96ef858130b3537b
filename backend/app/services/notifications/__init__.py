"""Game-outcome notifications.

Turns a game-over / clear report into a LINE push for the stored user.
HTTP concerns live in ``app.api.notify``; this package only knows about
users, message text and the messaging client.
"""

from .messages import NotificationMessage, compose_message
from .relay import MessagingIdentifierMissing, NotificationRelay, UserNotFound

__all__ = [
    'MessagingIdentifierMissing',
    'NotificationMessage',
    'NotificationRelay',
    'UserNotFound',
    'compose_message',
]
