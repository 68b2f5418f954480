"""Shared helpers."""

from .image_utils import image_mime_type, strip_data_uri

__all__ = ["image_mime_type", "strip_data_uri"]
