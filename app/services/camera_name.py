"""Camera name extraction from free-text clip descriptions.

This is a best-effort heuristic, not a parser. The description is split on
whitespace and the token directly before the first occurrence of the word
"camera" (compared case-insensitively) is taken as the camera name:

    "Lapangan 1 kiri camera"       -> "kiri"
    "Left side camera of Court 1"  -> "side"
    "camera near the net"          -> None  (nothing precedes it)
    "north-camera feed"            -> None  (no standalone "camera" token)

Punctuation stays attached to tokens, so "camera," does not match.
"""
from typing import Optional

KEYWORD = "camera"


def parse_camera_name(description: Optional[str]) -> Optional[str]:
    """Return the token preceding the word "camera", or None."""
    if not description:
        return None

    tokens = description.split()
    for i, token in enumerate(tokens):
        if token.lower() == KEYWORD:
            return tokens[i - 1] if i > 0 else None
    return None
