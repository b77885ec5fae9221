"""
Base domain exceptions.
"""


class VirementException(Exception):
    """Base exception for all Virement domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class InternalServiceError(VirementException):
    """Raised for unexpected faults. Never carries internal detail."""

    def __init__(self):
        super().__init__(
            "An error occurred while creating the transaction",
            code="INTERNAL_ERROR",
        )
