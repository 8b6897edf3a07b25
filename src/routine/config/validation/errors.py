"""Configuration errors.

Raised while loading :class:`~routine.config.settings.PagingSettings` from the
environment, and as the parent of the errors for a property-mapping registry
that is wired incorrectly. These are deployment faults, not caller mistakes.
"""
from routine.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings or mapping registrations are invalid, or loading them failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A setting with no default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting parsed but breaks a rule (e.g. ``max_page_size < 1``)."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
