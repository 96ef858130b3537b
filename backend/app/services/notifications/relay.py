from app.models import User
from .messages import NotificationMessage, compose_message


class UserNotFound(Exception):
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"user {user_id!r} not found")


class MessagingIdentifierMissing(Exception):
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"user {user_id!r} has no LINE user id")


class NotificationRelay:
    """Resolve a game user to a LINE recipient and push the outcome message."""

    def __init__(self, messaging_client):
        self.messaging_client = messaging_client

    def notify(self, user_id: str, score, is_game_over: bool) -> NotificationMessage:
        """Send one outcome notification.

        - Raises UserNotFound / MessagingIdentifierMissing before any push
        - Lookup and push errors propagate unchanged; nothing is retried
        """
        user = User.query.filter_by(id=user_id).first()
        if user is None:
            raise UserNotFound(user_id)
        if not user.line_user_id:
            raise MessagingIdentifierMissing(user_id)

        message = compose_message(score, is_game_over)
        self.messaging_client.push_message(user.line_user_id, message)
        return message
