"""Custom exceptions for macrowiki."""


class MacrowikiError(Exception):
    """Base exception for macrowiki operations."""


class ConfigurationError(MacrowikiError):
    """Invalid configuration value."""


class MacroStyleError(ConfigurationError, ValueError):
    """Macro style mapping cannot be used for expansion."""


class StorageError(MacrowikiError):
    """Error while reading or writing pages."""


class PageNotFoundError(StorageError):
    """Requested page does not exist."""


class InvalidPageTitleError(StorageError):
    """Page title is not a valid storage key."""


class RenderError(MacrowikiError):
    """Error during markdown rendering."""
