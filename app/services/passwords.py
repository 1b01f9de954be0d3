import secrets
import string

from passlib.context import CryptContext

# argon2 for new hashes; sha256_crypt hashes from older accounts still verify
# and are replaced on the next successful sign-in
pwd = CryptContext(
    schemes=["argon2", "sha256_crypt"],
    deprecated="auto",
)

TEMP_PASSWORD_ALPHABET = string.ascii_letters + string.digits


def hash_password(password: str) -> str:
    return pwd.hash(password)


def check_password(password: str, password_hash: str) -> tuple[bool, str | None]:
    """(matches, replacement hash or None when the stored one is current)."""
    return pwd.verify_and_update(password, password_hash)


def generate_temp_password(length: int = 12) -> str:
    return "".join(secrets.choice(TEMP_PASSWORD_ALPHABET) for _ in range(length))
