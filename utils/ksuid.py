"""
KSUID - K-Sortable Unique Identifier.

Used for snapshot and error ids: 4 bytes of seconds since the KSUID epoch
followed by 16 random bytes, base62 encoded to 27 characters.
"""

import secrets
import time

# KSUID epoch: 2014-05-13
KSUID_EPOCH = 1400000000
KSUID_LENGTH = 27
BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def _base62(n):
    chars = []
    while n > 0:
        n, remainder = divmod(n, 62)
        chars.append(BASE62[remainder])
    return "".join(reversed(chars)).rjust(KSUID_LENGTH, "0")


def generate_ksuid(now=None):
    """Generate a 27-character sortable unique ID."""
    seconds = int(time.time() if now is None else now) - KSUID_EPOCH
    raw = seconds.to_bytes(4, "big") + secrets.token_bytes(16)
    return _base62(int.from_bytes(raw, "big"))
