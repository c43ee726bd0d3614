"""
Service-level exceptions.

The cycle engine itself degrades gracefully on poor data and raises none of
these; they come from configuration and from the record-access collaborators
that feed it.
"""

class CycleKitError(Exception):
    """Base exception for the package."""
    pass

class SettingsError(CycleKitError):
    """Raised when engine settings cannot be built from configuration."""
    pass

class RecordStoreError(CycleKitError):
    """Base exception for record-access collaborator failures."""
    pass

class StoreConfigurationError(RecordStoreError):
    """Raised when a record store cannot be constructed from its configuration."""
    pass

class RecordStoreAccessError(RecordStoreError):
    """Raised when the backing store rejects or fails a read."""
    pass
