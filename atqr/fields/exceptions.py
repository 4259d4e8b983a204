class FieldTableError(Exception):
    """Raised when a field definition table violates its invariants."""
