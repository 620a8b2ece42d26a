# autopark/utils/text.py
"""Text clean-up helpers for trip and dispatch notes."""

import re

# Older clients wrote the arrow as a control character followed by "2"
_CONTROL_ARROW = re.compile(r"[\x00-\x1f]2")
_ASCII_ARROW = re.compile(r"\s->\s")

ARROW = " → "


def sanitize_arrows(text) -> str:
    """Replace corrupted and ASCII arrows with the unicode arrow."""
    if text is None:
        return ""
    cleaned = _CONTROL_ARROW.sub(ARROW, str(text))
    return _ASCII_ARROW.sub(ARROW, cleaned)
