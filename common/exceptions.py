"""Error taxonomy shared by the store, extraction and Gemini layers.

Each exception carries a ``message`` safe to show to API callers; the
detailed cause stays in ``str(exc)`` / ``__cause__`` for the server logs.
"""
from typing import Optional


class LegalAssistError(Exception):
    message = "Internal error"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.message)


class CaseNotFound(LegalAssistError):
    message = "Case not found"


class InvalidRequest(LegalAssistError):
    message = "Invalid request body"

    def __init__(self, message: Optional[str] = None):
        if message:
            self.message = message
        super().__init__(message)


class StoreError(LegalAssistError):
    message = "Database error"


class StoreUnavailable(StoreError):
    pass


class InvalidRecord(StoreError):
    pass


class DocumentError(LegalAssistError):
    pass


class UnsupportedFormat(DocumentError):
    message = "Uploaded file is not a valid PDF"


class EmptyDocument(DocumentError):
    message = "Empty or unreadable PDF"


class CorruptDocument(DocumentError):
    message = "Error analyzing document"


class UpstreamError(LegalAssistError):
    message = "Error fetching response from Gemini"

    def __init__(self, detail: Optional[str] = None, status_code: Optional[int] = None, body=None):
        super().__init__(detail)
        self.status_code = status_code
        self.body = body
