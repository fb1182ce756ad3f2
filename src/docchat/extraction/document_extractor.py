"""
Document text extraction.

Only PDF uploads are extracted; other media types are passed through.
"""
import logging
from typing import Optional, Protocol

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from ..exceptions import ExtractionError
from ..security.file_validator import FileValidator

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"


def is_extractable(media_type: Optional[str]) -> bool:
    """True when the declared media type is the extractable document type."""
    if not media_type:
        return False
    return media_type.split(";", 1)[0].strip().lower() == PDF_MEDIA_TYPE


class DocumentExtractor(Protocol):
    """Protocol for a document extractor used by the orchestrator."""
    def extract(self, file_path: str, media_type: str) -> str:
        ...


class PdfDocumentExtractor:
    """
    Extracts plain text from PDF files with pypdf.

    Pages are joined with blank lines; pages without a text layer
    contribute nothing.
    """

    def __init__(self, max_file_bytes: int = FileValidator.MAX_FILE_SIZE):
        self._max_file_bytes = max_file_bytes

    def extract(self, file_path: str, media_type: str) -> str:
        """
        Extract text from a PDF.

        :param file_path: Path to the uploaded file
        :param media_type: Declared media type
        :return: Extracted text (untrimmed)
        :raises ExtractionError: if the file is invalid or unreadable
        """
        if not is_extractable(media_type):
            raise ExtractionError(f"Unsupported media type for extraction: {media_type}")

        is_valid, error_msg = FileValidator.validate_document_file(
            file_path, max_size=self._max_file_bytes
        )
        if not is_valid:
            raise ExtractionError(error_msg)

        try:
            reader = PdfReader(file_path)
            if reader.is_encrypted:
                raise ExtractionError("Encrypted PDFs are not supported")
            parts = [page.extract_text() or "" for page in reader.pages]
        except ExtractionError:
            raise
        except (PdfReadError, OSError, ValueError, KeyError, TypeError) as e:
            raise ExtractionError(f"Failed to read PDF: {e}") from e

        text = "\n\n".join(part for part in parts if part)
        logger.info("Extracted %d chars from %d page(s)", len(text), len(parts))
        return text
