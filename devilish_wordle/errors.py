"""Fatal error types raised by the search."""


class SearchError(Exception):
    """Base class for all unrecoverable search errors."""


class MalformedWordError(SearchError, ValueError):
    """A word cannot be encoded (wrong length, bad letters or too many repeats)."""


class ExhaustedError(SearchError, RuntimeError):
    """No productive guess is left for the current game state."""


class EmptyDictionaryError(SearchError, ValueError):
    """The dictionary contains no usable words."""
