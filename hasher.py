import os
import hashlib
import hmac
import bcrypt
from argon2 import PasswordHasher
from argon2.exceptions import VerificationError, InvalidHash

# =========================================
# CONFIGURATION
# =========================================

HASH_MODES = ("none", "sha256", "bcrypt", "argon2id")
BCRYPT_ROUNDS = 12

# Argon2id: one pass over 64 MiB, single lane
ARGON2 = PasswordHasher(time_cost=1, memory_cost=64 * 1024, parallelism=1)


def get_pepper():
    """Read at call time so the environment can change between runs."""
    return os.getenv("PENGUIN_PEPPER")


def _get_peppered_password(password: str, use_pepper: bool) -> str:
    """Appends the secret pepper to the password if enabled."""
    if not use_pepper:
        return password
    pepper = get_pepper()
    if not pepper:
        raise ValueError("pepper requested but PENGUIN_PEPPER is not set")
    return password + pepper


def hash_password(password: str, mode: str, use_pepper: bool = False):
    """
    Hash a generated password for pasting into a config file.

    Returns (salt, hash). Only sha256 keeps its salt outside the hash;
    bcrypt and argon2id embed it, and "none" returns two empty strings.
    """
    if mode not in HASH_MODES:
        raise ValueError(f"unknown hash mode: {mode!r}")
    if mode == "none":
        return "", ""

    secret = _get_peppered_password(password, use_pepper).encode()
    if mode == "sha256":
        salt = os.urandom(16).hex()
        return salt, hashlib.sha256(secret + salt.encode()).hexdigest()
    if mode == "bcrypt":
        return "", bcrypt.hashpw(secret, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode()
    return "", ARGON2.hash(secret)


def verify_password(password: str, mode: str, salt: str, stored_hash: str, use_pepper: bool = False) -> bool:
    pwd_to_check = _get_peppered_password(password, use_pepper)

    if mode == "sha256":
        attempt = hashlib.sha256((pwd_to_check + salt).encode()).hexdigest()
        return hmac.compare_digest(attempt, stored_hash)

    elif mode == "bcrypt":
        try:
            return bcrypt.checkpw(pwd_to_check.encode(), stored_hash.encode())
        except ValueError:
            return False

    elif mode == "argon2id":
        try:
            return ARGON2.verify(stored_hash, pwd_to_check)
        except (VerificationError, InvalidHash):
            return False

    elif mode == "none":
        return False

    raise ValueError(f"unknown hash mode: {mode!r}")
