from .client import TextmagicClient
from .config_types import ClientConfig
from .errors import ApiError, ArgumentError, AuthError, ConfigurationError, NetworkError, TextmagicClientError
from .version import __version__

__all__ = [
    "TextmagicClient",
    "ClientConfig",
    "TextmagicClientError",
    "ApiError",
    "ArgumentError",
    "AuthError",
    "ConfigurationError",
    "NetworkError",
    "__version__",
]
