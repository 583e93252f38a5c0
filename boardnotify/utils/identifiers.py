"""Opaque identifier generation."""

from __future__ import annotations

import base64
import uuid
from typing import Final

ID_TYPE_BLOCK: Final[str] = "b"

# Alphabet shared with the boards product so ids stay URL and human friendly.
_ALPHABET: Final[bytes] = b"ybndrfg8ejkmcpqxot1uwisza345h769"
_TRANSLATION: Final[bytes] = bytes.maketrans(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ234567", _ALPHABET
)


def new_id(id_type: str = ID_TYPE_BLOCK) -> str:
    """Return a new 27 character identifier prefixed with ``id_type``."""

    encoded = base64.b32encode(uuid.uuid4().bytes).translate(_TRANSLATION)
    return id_type + encoded.rstrip(b"=").decode("ascii")
