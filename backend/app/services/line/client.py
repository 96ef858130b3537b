import httpx

from .credentials import LineCredentials


class LineApiError(Exception):
    """Raised when a push to the LINE Messaging API does not succeed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class LineMessagingClient:
    """Minimal LINE Messaging API client covering push messages."""

    PUSH_PATH = '/v2/bot/message/push'

    def __init__(
        self,
        credentials: LineCredentials,
        base_url: str = 'https://api.line.me',
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip('/')
        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={
                'Authorization': f"Bearer {credentials.channel_access_token}",
                'Content-Type': 'application/json',
            },
        )

    def push_message(self, to: str, message) -> None:
        """Push one message to a single LINE user.

        Args:
            to: LINE user id of the recipient
            message: object exposing ``to_dict()`` in LINE message format

        Raises:
            LineApiError: on transport failure or a non-2xx response
        """
        payload = {'to': to, 'messages': [message.to_dict()]}
        try:
            response = self._http.post(self.PUSH_PATH, json=payload)
        except httpx.HTTPError as exc:
            raise LineApiError(f"LINE push request failed: {exc}") from exc
        if response.is_error:
            raise LineApiError(
                f"LINE push rejected with status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

    def close(self) -> None:
        self._http.close()
