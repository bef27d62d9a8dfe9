"""Table-of-contents codec."""

from .codec import META_BLOCK_LINES, decode_toc, encode_toc

__all__ = ["META_BLOCK_LINES", "decode_toc", "encode_toc"]
