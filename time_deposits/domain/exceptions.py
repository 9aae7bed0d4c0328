"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class DuplicatePolicyError(DomainException):
    """Two interest policies were registered for the same plan type"""

    pass


class DepositNotFoundError(DomainException):
    """No time deposit exists with the requested id"""

    pass
