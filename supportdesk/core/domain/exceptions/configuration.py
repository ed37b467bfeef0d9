"""Configuration-related exceptions."""

from .base import SupportDeskError


class ConfigurationError(SupportDeskError):
    """Configuration or environment variable errors."""

    error_code = "SD_CFG_001"


class InvalidConfigurationError(ConfigurationError):
    """Configuration value is invalid."""

    error_code = "SD_CFG_002"
