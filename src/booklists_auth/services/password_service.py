"""bcrypt password hashing and the password length rules.

bcrypt reads at most 72 bytes of input, so passwords are first reduced to a
base64-encoded SHA-256 digest (44 bytes). Every character up to the
128-character maximum therefore affects the hash.
"""

import base64
import hashlib

import bcrypt

from booklists_auth.exceptions import WeakPasswordError

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_LENGTH = 128


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


class PasswordHashingService:
    """Hash and verify user passwords.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> stored = service.hash("correct-horse")
    >>> service.verify("correct-horse", stored)
    True
    """

    MIN_LENGTH = MIN_PASSWORD_LENGTH
    MAX_LENGTH = MAX_PASSWORD_LENGTH

    def __init__(self, rounds: int = 12):
        """
        Parameters
        ----------
        rounds
            bcrypt work factor (log2 of the iteration count). Tests use 4.
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """
        Raises
        ------
        WeakPasswordError
            If the password breaks the length rules
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_prehash(password), salt).decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        """False for a wrong password and for anything that is not a bcrypt hash."""
        try:
            return bcrypt.checkpw(_prehash(password), password_hash.encode("ascii"))
        except ValueError:
            return False

    def validate_strength(self, password: str) -> None:
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)
        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)
        if len(password) > self.MAX_LENGTH:
            msg = f"Password cannot exceed {self.MAX_LENGTH} characters"
            raise WeakPasswordError(msg)

    def needs_rehash(self, password_hash: str) -> bool:
        """True when the hash used another work factor or cannot be parsed."""
        # $2b$<cost>$<salt and digest>
        parts = password_hash.split("$")
        if len(parts) != 4 or not parts[2].isdigit():
            return True
        return int(parts[2]) != self._rounds
