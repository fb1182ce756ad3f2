from .document_extractor import (
    PDF_MEDIA_TYPE,
    DocumentExtractor,
    PdfDocumentExtractor,
    is_extractable,
)

__all__ = ["PDF_MEDIA_TYPE", "DocumentExtractor", "PdfDocumentExtractor", "is_extractable"]
