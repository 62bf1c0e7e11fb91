import hashlib
import random
from typing import Optional

SEED_BITS = 48
SEED_MASK = (1 << SEED_BITS) - 1


def _hash_seed(raw: bytes) -> int:
    digest = hashlib.sha256(raw).hexdigest()
    return int(digest, 16) & SEED_MASK


def normalize_seed(value: Optional[object]) -> Optional[int]:
    """
    Turn a user-supplied seed into an int. None, blank strings and 0 mean
    "no seed" and return None so the caller picks a random one.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return int(value) or None
    if isinstance(value, int):
        return value or None
    if isinstance(value, str):
        cleaned = value.strip()
        if not cleaned:
            return None
        try:
            return (int(cleaned, 0) & SEED_MASK) or None
        except ValueError:
            return _hash_seed(cleaned.encode("utf-8"))
    if isinstance(value, (bytes, bytearray)):
        return _hash_seed(bytes(value))
    try:
        return (int(value) & SEED_MASK) or None  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return _hash_seed(str(value).encode("utf-8"))


def resolve_seed(value: Optional[object]) -> int:
    seed = normalize_seed(value)
    if seed is None:
        # never 0, so the effective seed can be fed back in to replay the run
        seed = random.SystemRandom().randrange(1, 1 << SEED_BITS)
    return seed
