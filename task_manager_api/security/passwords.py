# task_manager_api/security/passwords.py

from __future__ import annotations

import bcrypt


class PasswordHasher:
    """
    Salted bcrypt hashing for user passwords.

    ``rounds`` is the bcrypt cost factor; tests lower it to keep the suite fast.
    """

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds
        # Used when the email is unknown so that login takes as long as
        # a real password check.
        self._dummy_hash = self.hash("dummy-password")

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False

    def burn(self, password: str) -> None:
        """Run a throwaway comparison against a dummy hash."""
        self.verify(password, self._dummy_hash)


__all__ = ["PasswordHasher"]
