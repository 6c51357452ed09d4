"""
Exceptions raised by the back-office service layer.

The pricing and conversion functions never raise these; they belong to the
workflow that validates input and stores documents.
"""


class BackOfficeError(ValueError):
    """Base exception for back-office workflow errors."""
    pass


class ValidationError(BackOfficeError):
    """Raised when caller input is rejected before reaching the core."""

    def __init__(self, field, message=None):
        self.field = field
        if message is None:
            message = f"Invalid value for '{field}'"
        super().__init__(message)


class DocumentNotFoundError(BackOfficeError):
    """Raised when a quote, invoice, order or package id is unknown."""

    def __init__(self, kind, document_id, message=None):
        self.kind = kind
        self.document_id = document_id
        if message is None:
            message = f"{kind.capitalize()} '{document_id}' not found"
        super().__init__(message)


class DocumentConflictError(BackOfficeError):
    """Raised when a generated document number is already taken."""

    def __init__(self, kind, number, message=None):
        self.kind = kind
        self.number = number
        if message is None:
            message = f"{kind.capitalize()} number '{number}' already exists"
        super().__init__(message)


class InvalidStatusTransition(BackOfficeError):
    """Raised when a status change is not in the transition table."""

    def __init__(self, kind, from_status, to_status, message=None):
        self.kind = kind
        self.from_status = from_status
        self.to_status = to_status
        if message is None:
            message = f"Cannot move {kind} from '{from_status}' to '{to_status}'"
        super().__init__(message)
