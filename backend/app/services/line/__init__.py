"""LINE Messaging API access: channel credentials and the push client."""

from .client import LineApiError, LineMessagingClient
from .credentials import ConfigurationError, LineCredentials

__all__ = [
    'ConfigurationError',
    'LineApiError',
    'LineCredentials',
    'LineMessagingClient',
]
