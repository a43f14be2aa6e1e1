#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoctree/utils/encoding.py
"""Character encoding detection for AsciiDoc source files.

Top-level documents and included files are read as bytes and decoded here:
strict UTF-8 first, then chardet-based detection, then a list of fallback
encodings ending in latin-1 (which accepts any byte sequence).
"""

from __future__ import annotations

import logging

import chardet

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ["utf-8", "utf-8-sig", "latin-1"]


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = 0.7,
) -> str | None:
    """Detect character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of bytes to sample for detection (uses first N bytes)
    confidence_threshold : float, default 0.7
        Minimum confidence level (0.0-1.0) required to trust detection

    Returns
    -------
    str | None
        Detected encoding name, or None when detection fails or the
        confidence is below the threshold

    """
    sample = data[:sample_size]
    result = chardet.detect(sample)
    if not result or not result.get("encoding"):
        logger.debug("chardet: No encoding detected")
        return None

    encoding = result["encoding"]
    confidence = result.get("confidence") or 0.0
    logger.debug("chardet detected encoding: %s (confidence: %.2f)", encoding, confidence)

    if confidence >= confidence_threshold:
        return encoding
    logger.debug("chardet confidence %.2f below threshold %s", confidence, confidence_threshold)
    return None


def read_text_with_encoding_detection(
    data: bytes,
    fallback_encodings: list[str] | None = None,
    use_chardet: bool = True,
    chardet_sample_size: int = 8192,
    chardet_confidence_threshold: float = 0.7,
) -> str:
    """Decode binary data as text.

    Strategies, in order:
    1. Strict UTF-8 (a successful UTF-8 decode is taken as authoritative)
    2. chardet-based detection, if enabled
    3. Fallback encodings in order
    4. UTF-8 with error replacement

    Parameters
    ----------
    data : bytes
        Binary data to decode
    fallback_encodings : list[str] | None, default None
        Encodings to try in order. If None, uses
        ``['utf-8', 'utf-8-sig', 'latin-1']``
    use_chardet : bool, default True
        Whether to attempt chardet-based detection
    chardet_sample_size : int, default 8192
        Number of bytes to sample for chardet detection
    chardet_confidence_threshold : float, default 0.7
        Minimum confidence for chardet detection

    Returns
    -------
    str
        Decoded text content

    Examples
    --------
    >>> read_text_with_encoding_detection("Caf\\u00e9".encode("utf-8"))
    'Café'

    """
    if data.startswith(b"\xef\xbb\xbf"):
        return data.decode("utf-8-sig")

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Input is not valid UTF-8, detecting encoding")

    if use_chardet:
        detected_encoding = detect_encoding(
            data,
            sample_size=chardet_sample_size,
            confidence_threshold=chardet_confidence_threshold,
        )
        if detected_encoding:
            try:
                return data.decode(detected_encoding)
            except (UnicodeDecodeError, LookupError) as e:
                logger.debug("Failed to decode with chardet-detected encoding %s: %s", detected_encoding, e)

    for encoding in fallback_encodings or DEFAULT_FALLBACK_ENCODINGS:
        try:
            return data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug("Failed to decode with %s: %s", encoding, e)

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")
