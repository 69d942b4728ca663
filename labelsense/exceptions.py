"""
Exceptions for LabelSense.

Raised by the scan service and translated into structured JSON
responses by the API error handlers.
"""


class LabelSenseException(Exception):
    """Base exception for LabelSense errors."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        detail: str = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class NoTextFoundError(LabelSenseException):
    """The OCR capture produced no usable text."""

    def __init__(self, detail: str = None):
        super().__init__(
            message="No text found",
            code="NO_TEXT",
            status_code=422,
            detail=detail or "Could not read any text from the label. Please try scanning again.",
        )

