from dataclasses import dataclass
from typing import Mapping


class ConfigurationError(Exception):
    """Raised when required process configuration is missing."""


@dataclass(frozen=True)
class LineCredentials:
    """Channel credentials for the LINE Messaging API.

    Built once at startup and handed to the messaging client, so request
    handlers never touch the process environment.
    """

    channel_access_token: str
    channel_secret: str

    @classmethod
    def from_config(cls, config: Mapping) -> 'LineCredentials':
        token = config.get('CHANNEL_ACCESS_TOKEN')
        secret = config.get('CHANNEL_SECRET')
        missing = [name for name, value in (
            ('CHANNEL_ACCESS_TOKEN', token),
            ('CHANNEL_SECRET', secret),
        ) if not value]
        if missing:
            raise ConfigurationError(f"Missing LINE channel configuration: {', '.join(missing)}")
        return cls(channel_access_token=token, channel_secret=secret)

    def __repr__(self) -> str:
        # Keep secrets out of logs and tracebacks
        return 'LineCredentials(channel_access_token=***, channel_secret=***)'
