"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class BankAPIError(DomainException):
    """Bank API returned an error or is unavailable"""

    pass
