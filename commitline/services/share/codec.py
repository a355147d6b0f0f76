"""
Stateless share tokens.

A token is the snapshot's JSON, base64-encoded with the URL-safe alphabet and
without padding, so it can sit in a path segment as-is.
"""

import base64
import logging

from commitline.schemas.share import ShareSnapshot

logger = logging.getLogger(__name__)


class InvalidShareError(ValueError):
    """Share token could not be decoded into a snapshot."""


def encode_share(snapshot: ShareSnapshot) -> str:
    """Serialize a snapshot into a URL-safe token."""
    payload = snapshot.model_dump_json(by_alias=True, exclude_none=True)
    token = base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii")
    return token.rstrip("=")


def decode_share(share_id: str) -> ShareSnapshot:
    """
    Rebuild a snapshot from its token.

    Raises:
        InvalidShareError: If the token is not valid base64, JSON, or snapshot data
    """
    if not share_id:
        raise InvalidShareError("Share ID is required")

    padded = share_id + "=" * (-len(share_id) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        # pydantic's ValidationError, binascii.Error and Unicode errors are all ValueErrors
        return ShareSnapshot.model_validate_json(raw)
    except ValueError as e:
        logger.debug(f"Rejected share token: {e}")
        raise InvalidShareError("Invalid share ID") from e
