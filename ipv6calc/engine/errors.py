"""Error taxonomy for the address codec and subnet planner."""

from ..models.address import ErrorKind


class AddressParseError(ValueError):
    """Raised inside the codec; ``parse`` turns it into an invalid record."""

    def __init__(self, kind: ErrorKind, detail: str):
        super().__init__(detail)
        self.kind = kind
        self.detail = detail


class PlannerError(ValueError):
    """Base class for errors raised to callers of the subnet planner."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPrefixError(PlannerError):
    """The base network could not be parsed."""

    kind = ErrorKind.INVALID_PREFIX


class InvalidTargetError(PlannerError):
    """Target prefix is not strictly longer than the base, or exceeds 128."""

    kind = ErrorKind.INVALID_TARGET
