class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class StepOrderError(ProcessorError):
    """Raised when a step runs before the data it needs has been produced."""
