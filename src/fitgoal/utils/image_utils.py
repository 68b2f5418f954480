"""Utilities for base64 image payloads sent by the front-end."""

import re

DEFAULT_MIME_TYPE = "image/jpeg"

# e.g. "data:image/png;base64,"
DATA_URI_PREFIX = re.compile(r"^data:image/(\w+);base64,")


def strip_data_uri(value: str) -> str:
    """Return the bare base64 payload of an image string.

    Accepts either a data URI (``data:image/png;base64,AAA``) or a bare
    payload, which is returned unchanged. The payload itself is not checked.
    """
    return DATA_URI_PREFIX.sub("", value, count=1)


def image_mime_type(value: str, default: str = DEFAULT_MIME_TYPE) -> str:
    """Get the MIME type declared by a data URI, or the default."""
    match = DATA_URI_PREFIX.match(value)
    if match is None:
        return default
    return f"image/{match.group(1).lower()}"
