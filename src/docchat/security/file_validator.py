"""
File upload validation.

OOP: Single Responsibility - Only handles file validation.
"""
from pathlib import Path
from typing import Optional, Tuple


class FileValidator:
    """
    Validates uploaded document files before extraction.

    Checks existence, size and the PDF magic header so that garbage is
    rejected before it reaches the parser.
    """

    MAX_FILE_SIZE = 10 * 1024 * 1024
    PDF_MAGIC = b"%PDF-"

    @staticmethod
    def validate_document_file(
        file_path: str, max_size: Optional[int] = None
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate an uploaded PDF file.

        :param file_path: Path to the file to validate
        :param max_size: Size limit in bytes (defaults to MAX_FILE_SIZE)
        :return: Tuple of (is_valid, error_message)
        """
        limit = max_size if max_size is not None else FileValidator.MAX_FILE_SIZE
        path = Path(file_path)

        if not path.is_file():
            return False, "File does not exist"

        try:
            file_size = path.stat().st_size
        except OSError as e:
            return False, f"Cannot read file size: {e}"

        if file_size == 0:
            return False, "File is empty"

        if file_size > limit:
            return False, f"File size {file_size} bytes exceeds maximum {limit} bytes"

        try:
            with path.open("rb") as fh:
                header = fh.read(1024)
        except OSError as e:
            return False, f"Cannot read file: {e}"

        if FileValidator.PDF_MAGIC not in header:
            return False, "File is not a valid PDF"

        return True, None
