"""
Temporary upload handling.

Uploads are written to a named temp file for the extractor and removed
after the request. Removal is best effort.
"""
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from .schemas import UploadedFile

logger = logging.getLogger(__name__)


def save_upload(file_storage, media_type: Optional[str] = None) -> UploadedFile:
    """
    Persist a werkzeug FileStorage to a temporary file.

    :param file_storage: Uploaded file object from ``request.files``
    :param media_type: Declared media type (defaults to the upload's mimetype)
    :return: UploadedFile pointing at the temp file
    """
    suffix = Path(file_storage.filename or "").suffix
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix, prefix="docchat-") as tmp:
        file_storage.save(tmp)
        tmp_path = tmp.name
    return UploadedFile(
        path=tmp_path,
        media_type=media_type or file_storage.mimetype or "application/octet-stream",
        filename=file_storage.filename,
    )


def discard_upload(upload: Optional[UploadedFile]) -> None:
    """Remove the temp file; failures are logged at debug level and ignored."""
    if upload is None:
        return
    try:
        os.unlink(upload.path)
    except OSError as e:
        logger.debug("Could not remove upload %s: %s", upload.path, e)
