"""
Service-level exceptions.

The cycle calculations never raise; these exceptions belong to the event
store that feeds them.
"""

class EventStoreError(Exception):
    """Base exception for event store errors."""
    pass

class EntryNotFoundError(EventStoreError):
    """Raised when deleting an event or daily log that does not exist."""
    pass
