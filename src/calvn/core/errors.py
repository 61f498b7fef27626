class CalvnError(Exception):
    """Base error."""

class UnknownEngineError(CalvnError, KeyError):
    """Raised when an engine name is not in the registry."""

class UnknownAttributeError(CalvnError, KeyError):
    """Raised when a day attribute has not been registered."""

class RegistryNotInitializedError(CalvnError, RuntimeError):
    """Raised when the API is used before the engine registry is built."""

class DuplicateEngineError(CalvnError, KeyError):
    """Raised when registering a name that is already taken."""
