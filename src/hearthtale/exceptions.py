class HearthtaleError(Exception):
    """Base exception for the Hearthtale project."""


class ConfigError(HearthtaleError):
    """Raised when the engine configuration cannot be read or is invalid."""


class NarrationSinkError(HearthtaleError):
    """Raised when the narration event log cannot be opened."""


class ItemError(HearthtaleError, ValueError):
    """Raised when an item is constructed with invalid parameters."""


class ActionError(HearthtaleError):
    """Raised when a character action cannot be performed (dead actor, bad target, missing item)."""


class CapabilityError(ActionError):
    """Raised when a character is asked to act through a role it does not have."""
