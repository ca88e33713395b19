"""
Error types shared by the store, the scanner and the toggle protocol
"""


class LazyFestivalError(Exception):
    """Base class for all errors raised by this package"""


class PersistenceError(LazyFestivalError):
    """The subscription store is unreachable or a write failed"""


class DeliveryError(LazyFestivalError):
    """An outbound message could not be sent"""


class UnresolvedPerformance(LazyFestivalError, LookupError):
    """No performance with the given name exists in the lineup"""

    def __init__(self, name: str):
        super().__init__(f"Unknown performance: {name!r}")
        self.name = name
