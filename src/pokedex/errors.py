class PokedexError(Exception):
    """Base error for Pokedex domain exceptions."""


class StorageError(PokedexError):
    """Base exception for collection load/save errors."""


class CorruptStoreError(StorageError):
    """Raised when the collection file cannot be decoded into records."""


class FormValidationError(PokedexError):
    """Raised when a form is submitted with invalid field values."""
