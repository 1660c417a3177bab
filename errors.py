"""Exceptions raised by the notifier. None of them are handled internally."""


class NotifierError(Exception):
    """Base class for every failure that ends a notifier run."""


class ConfigError(NotifierError):
    """A required setting is missing. Raised before any network activity."""


class NetworkError(NotifierError):
    """Transport failure, timeout, non-2xx status or an unreadable JSON body."""


class DeserializationError(NotifierError):
    """The API response does not have the expected shape."""
