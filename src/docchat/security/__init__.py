"""
Upload validation.
"""
from .file_validator import FileValidator

__all__ = ["FileValidator"]
