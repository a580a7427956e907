import threading

from guesser.core.config import settings
from guesser.core.guard import CredentialGuard


class SerializedGuard:
    """
    One hosted guard shared by every request.

    FastAPI runs sync endpoints on a threadpool, so calls into the guard
    take a lock.
    """

    def __init__(self, guard: CredentialGuard):
        self._guard = guard
        self._lock = threading.Lock()

    def match(self, guess: str) -> bool:
        with self._lock:
            return self._guard.match(guess)

    def remaining(self) -> int:
        with self._lock:
            return self._guard.remaining()


hosted_guard = SerializedGuard(CredentialGuard(settings.GUARD_SECRET))


def get_guard() -> SerializedGuard:
    return hosted_guard
