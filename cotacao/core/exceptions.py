"""
Domain exceptions for the quotation engine.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class QuotationError(Exception):
    """Base exception for all quotation engine errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(QuotationError):
    """Base exception for storage operations."""

    pass


class StorageUnavailableError(StorageError):
    """Storage backend failed; the requested operation was not applied."""

    def __init__(self, operation: str, reason: str | None = None):
        super().__init__(
            f"Storage unavailable during {operation}" + (f": {reason}" if reason else ""),
            code="STORAGE_UNAVAILABLE",
            details={"operation": operation, "reason": reason},
        )


class QuotationListNotFoundError(StorageError):
    """Quotation list not found in storage."""

    def __init__(self, list_id: str):
        super().__init__(
            f"Quotation list not found: {list_id}",
            code="LIST_NOT_FOUND",
            details={"list_id": list_id},
        )


class ConcurrentModificationError(StorageError):
    """Stored list changed since it was loaded."""

    def __init__(self, list_id: str, expected_version: int):
        super().__init__(
            f"Quotation list {list_id} was modified concurrently "
            f"(expected version {expected_version})",
            code="CONCURRENT_MODIFICATION",
            details={"list_id": list_id, "expected_version": expected_version},
        )


# Catalog Exceptions
class CatalogError(QuotationError):
    """Base exception for product catalog operations."""

    pass


class EmptyCatalogError(CatalogError):
    """No valid product rows were found."""

    def __init__(self, rows_received: int = 0):
        super().__init__(
            "No valid products found in the imported list",
            code="EMPTY_CATALOG",
            details={"rows_received": rows_received},
        )


class SheetReadError(CatalogError):
    """An uploaded product sheet could not be read."""

    def __init__(self, filename: str, reason: str):
        super().__init__(
            f"Failed to read '{filename}': {reason}",
            code="SHEET_UNREADABLE",
            details={"filename": filename, "reason": reason},
        )


# Lifecycle Exceptions
class LifecycleError(QuotationError):
    """Base exception for quotation list state transitions."""

    pass


class AlreadyFinalizedError(LifecycleError):
    """Finalize was requested on a list that is already finalized."""

    def __init__(self, list_id: str):
        super().__init__(
            f"Quotation list already finalized: {list_id}",
            code="ALREADY_FINALIZED",
            details={"list_id": list_id},
        )


class ListFinalizedError(LifecycleError):
    """The list is finalized and no longer accepts links or responses."""

    def __init__(self, list_id: str):
        super().__init__(
            f"Quotation list is finalized: {list_id}",
            code="LIST_FINALIZED",
            details={"list_id": list_id},
        )


# Link Exceptions
class LinkError(QuotationError):
    """Base exception for response link operations."""

    pass


class LinkNotFoundError(LinkError):
    """No response link matches the token."""

    def __init__(self, token: str):
        super().__init__(
            "Response link not found",
            code="LINK_NOT_FOUND",
            details={"token": token},
        )


class LinkAlreadyRespondedError(LinkError):
    """The response link was already used."""

    def __init__(self, link_id: str, supplier_name: str | None = None):
        super().__init__(
            f"Response link already used: {link_id}",
            code="LINK_ALREADY_RESPONDED",
            details={"link_id": link_id, "supplier_name": supplier_name},
        )


# Submission Exceptions
class SubmissionError(QuotationError):
    """Base exception for supplier submissions."""

    pass


class EmptyResponseError(SubmissionError):
    """Every submitted price was blank."""

    def __init__(self, link_id: str):
        super().__init__(
            "At least one price must be filled in before submitting",
            code="EMPTY_RESPONSE",
            details={"link_id": link_id},
        )


# Validation Exceptions
class ValidationError(QuotationError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value else None,
            },
        )


class FileTooLargeError(ValidationError):
    """Uploaded file exceeds size limit."""

    def __init__(self, filename: str, size: int, max_size: int):
        super().__init__(
            field="file",
            message=f"File '{filename}' is too large ({size} bytes, max {max_size})",
        )
        self.details.update(
            {
                "filename": filename,
                "size": size,
                "max_size": max_size,
            }
        )


class UnsupportedFileTypeError(ValidationError):
    """File type is not supported."""

    def __init__(self, filename: str, extension: str, allowed: list[str]):
        super().__init__(
            field="file",
            message=f"Unsupported file type '{extension}'. Allowed: {', '.join(allowed)}",
        )
        self.details.update(
            {
                "filename": filename,
                "extension": extension,
                "allowed": allowed,
            }
        )


class ConfigurationError(QuotationError):
    """Configuration error."""

    pass
