"""Share link encoding."""

from commitline.services.share.codec import InvalidShareError, decode_share, encode_share

__all__ = [
    "InvalidShareError",
    "decode_share",
    "encode_share",
]
