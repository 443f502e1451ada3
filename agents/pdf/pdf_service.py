import io
from pdfminer.high_level import extract_text
from pdfminer.layout import LAParams
from pdfminer.psparser import PSException
from common.exceptions import CorruptDocument, EmptyDocument, UnsupportedFormat
from common.logging import logger

PDF_MEDIA_TYPE = "application/pdf"


class PDFProcessor:
    """Plain-text extraction for uploaded legal documents"""

    def __init__(self):
        self.supported_media_types = [PDF_MEDIA_TYPE]
        self.laparams = LAParams()

    def extract_text(self, content: bytes, content_type: str) -> str:
        """Extract the text layer of a PDF, trimmed.

        Raises UnsupportedFormat for anything not declared as a PDF,
        CorruptDocument when pdfminer cannot parse the bytes and
        EmptyDocument when no text comes out (e.g. scanned images).
        """
        if content_type not in self.supported_media_types:
            raise UnsupportedFormat(f"Declared content type {content_type!r} is not a PDF")

        try:
            text = extract_text(io.BytesIO(content), laparams=self.laparams)
        except (PSException, ValueError, KeyError, TypeError) as e:
            logger.error(f"PDF text extraction error: {e}")
            raise CorruptDocument(f"Could not parse PDF: {e}") from e

        text = (text or "").strip()
        if not text:
            raise EmptyDocument("PDF has no extractable text")
        return text


# Global processor instance
pdf_processor = PDFProcessor()
