"""Password Hashing: salted PBKDF2-SHA256 encode/verify.

Invariants:
    - Encoded form: "pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>"
    - verify_password compares digests in constant time
    - Malformed encodings (including iteration counts < 1) never verify;
      no exception leaks to the login path
    - Any str hashes, lone surrogates included (surrogatepass encoding)
    - dummy_hash(n) costs the same to verify as a real hash of n iterations
"""

import hashlib
import hmac
import secrets
from functools import lru_cache

ALGORITHM = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 600_000
SALT_BYTES = 16


def _encode(password: str) -> bytes:
    return password.encode("utf-8", "surrogatepass")


def hash_password(
    password: str, iterations: int = DEFAULT_ITERATIONS, salt: bytes | None = None,
) -> str:
    salt = salt if salt is not None else secrets.token_bytes(SALT_BYTES)
    digest = hashlib.pbkdf2_hmac("sha256", _encode(password), salt, iterations)
    return f"{ALGORITHM}${iterations}${salt.hex()}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, iterations, salt_hex, digest_hex = encoded.split("$")
        rounds = int(iterations)
        salt = bytes.fromhex(salt_hex)
        if algorithm != ALGORITHM or rounds < 1:
            return False
        candidate = hashlib.pbkdf2_hmac("sha256", _encode(password), salt, rounds)
    except ValueError:
        return False
    return hmac.compare_digest(candidate.hex(), digest_hex)


@lru_cache
def dummy_hash(iterations: int = DEFAULT_ITERATIONS) -> str:
    """Hash verified in place of a missing account's, so unknown usernames cost the same."""
    return hash_password(secrets.token_hex(SALT_BYTES), iterations)
