class DetectorError(Exception):
    """Raised when detector output cannot be read or decoded."""
