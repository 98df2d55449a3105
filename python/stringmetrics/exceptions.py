"""Exception hierarchy for stringmetrics."""


class StringMetricsError(Exception):
    """Base exception for all stringmetrics errors."""


class ValidationError(StringMetricsError, ValueError):
    """Raised when input validation fails (mismatched lengths, wrong argument types)."""


class ConfigurationError(StringMetricsError, ValueError):
    """Raised when an unknown metric is requested or a configuration value is out of range."""


__all__ = ["StringMetricsError", "ValidationError", "ConfigurationError"]
