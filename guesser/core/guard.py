import enum
from dataclasses import dataclass

from guesser.core.logging import get_security_logger

MAX_SECRET_LENGTH = 32
MAX_ATTEMPTS = 3
MAX_DISTANCE = 2

sec_logger = get_security_logger()


def distance(secret: str, guess: str) -> int:
    """
    Position-wise mismatches plus the length gap, capped at len(secret).

    Not an edit distance: "abc" vs "xabc" scores 3, and a secret shorter
    than three characters never scores above MAX_DISTANCE.
    """
    mismatches = sum(1 for s, g in zip(secret, guess) if s != g)
    gap = abs(len(secret) - len(guess))
    return min(len(secret), mismatches + gap)


class GuardStatus(str, enum.Enum):
    active = "active"
    locked = "locked"


@dataclass(frozen=True)
class GuardState:
    status: GuardStatus = GuardStatus.active
    remaining_attempts: int = MAX_ATTEMPTS

    @property
    def locked(self) -> bool:
        return self.status is GuardStatus.locked

    def advance(self, exact: bool, dist: int) -> "GuardState":
        # locked never goes back to active
        if exact and not self.locked:
            return GuardState(GuardStatus.active, MAX_ATTEMPTS)

        remaining = max(self.remaining_attempts - 1, 0)
        status = self.status
        if remaining == 0 or dist > MAX_DISTANCE:
            status = GuardStatus.locked
        return GuardState(status, remaining)


class CredentialGuard:
    """
    Holds one secret and scores guesses against it.

    Three failed guesses in a row, or a single guess further than
    MAX_DISTANCE from the secret, lock the guard for good. A correct guess
    while unlocked restores the attempt budget. The counter keeps going down
    after the lock, so it says nothing about whether the guard is locked.

    Not thread-safe; callers sharing one guard must serialize match().
    """

    def __init__(self, secret: str):
        self._secret = secret[:MAX_SECRET_LENGTH]
        self._state = GuardState()

    @property
    def locked(self) -> bool:
        return self._state.locked

    def remaining(self) -> int:
        return self._state.remaining_attempts

    def match(self, guess: str) -> bool:
        dist = distance(self._secret, guess)
        exact = guess == self._secret
        before = self._state
        self._state = before.advance(exact, dist)

        if exact and not before.locked:
            sec_logger.info("Guess accepted")
            return True

        sec_logger.warning(
            f"Guess rejected len={len(guess)} distance={dist} "
            f"remaining={self._state.remaining_attempts}"
        )
        if self._state.locked and not before.locked:
            reason = "distance" if dist > MAX_DISTANCE else "exhausted"
            sec_logger.warning(f"Guard locked reason={reason}")
        return False

    def __repr__(self) -> str:
        return (
            f"CredentialGuard(status={self._state.status.value}, "
            f"remaining={self._state.remaining_attempts})"
        )
