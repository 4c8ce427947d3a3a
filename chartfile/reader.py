"""
Chart file loading for chartfile.

The parser itself only ever sees a ``str``; this module turns the bytes on
disk into one.  Chart files in the wild come from many editors, so the
encoding is sniffed:

- An explicit *encoding* argument always wins.
- A UTF-8 byte order mark selects ``utf-8-sig`` (the BOM is dropped).
- A UTF-16 LE/BE byte order mark selects ``utf-16``.
- Otherwise strict UTF-8 is tried, falling back to Latin-1, which can
  decode any byte sequence.
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path

from chartfile.exceptions import ChartDecodeError

logger = logging.getLogger(__name__)

_FALLBACK_ENCODING = "latin-1"


def detect_encoding(data: bytes) -> str | None:
    """Return the encoding named by *data*'s byte order mark, if any."""
    if data.startswith(codecs.BOM_UTF8):
        return "utf-8-sig"
    if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return "utf-16"
    return None


def decode_chart_bytes(data: bytes, encoding: str | None = None) -> str:
    """Decode raw chart bytes to text.

    Args:
        data: File contents.
        encoding: Force a specific codec instead of sniffing.

    Returns:
        The decoded text.

    Raises:
        ChartDecodeError: If *encoding* is given and is unknown or fails
            to decode *data*, or a BOM-announced UTF-16 body is invalid.
    """
    if encoding is not None:
        try:
            return data.decode(encoding)
        except (LookupError, UnicodeDecodeError) as exc:
            raise ChartDecodeError(
                f"Could not decode chart as {encoding}: {exc}"
            ) from exc

    detected = detect_encoding(data)
    if detected is not None:
        logger.debug("Byte order mark found, decoding as %s", detected)
        try:
            return data.decode(detected)
        except UnicodeDecodeError as exc:
            raise ChartDecodeError(
                f"Chart starts with a {detected} byte order mark "
                f"but is not valid {detected}: {exc}"
            ) from exc

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning(
            "Chart is not valid UTF-8, falling back to %s", _FALLBACK_ENCODING
        )
        return data.decode(_FALLBACK_ENCODING)


def read_chart_text(path: str | Path, encoding: str | None = None) -> str:
    """Read and decode a chart file from disk.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ChartDecodeError: See ``decode_chart_bytes``.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Chart file not found: {path}")
    data = path.read_bytes()
    logger.info("Read %d bytes from %s", len(data), path)
    return decode_chart_bytes(data, encoding)
