"""k1s0 flags client library."""

from .client import FlagsClient, HttpFlagsClient, InMemoryFlagsClient
from .config import (
    DEFAULT_FEATURES_URI,
    FlagsConfig,
    NormalizedFlagsConfig,
    load_config,
    normalize,
)
from .exceptions import ConfigurationError, ConfigurationErrorCodes
from .models import FlagStrategy, FlagValue

__all__ = [
    "DEFAULT_FEATURES_URI",
    "ConfigurationError",
    "ConfigurationErrorCodes",
    "FlagStrategy",
    "FlagValue",
    "FlagsClient",
    "FlagsConfig",
    "HttpFlagsClient",
    "InMemoryFlagsClient",
    "NormalizedFlagsConfig",
    "load_config",
    "normalize",
]
