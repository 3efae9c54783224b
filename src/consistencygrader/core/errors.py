"""Exception types raised by the consistency pipeline."""


class ConsistencyGraderError(Exception):
    """Base class for all grader errors."""


class InputValidationError(ConsistencyGraderError, ValueError):
    """The submitted content set cannot be analyzed."""


class InternalComputationError(ConsistencyGraderError):
    """An analysis stage failed unexpectedly; no report is produced."""
