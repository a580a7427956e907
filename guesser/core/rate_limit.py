import time
from collections import defaultdict, deque
from typing import Deque, Dict

from guesser.core.config import settings


class RateLimiter:
    def __init__(self, max_requests: int, window_seconds: int):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.storage: Dict[str, Deque[float]] = defaultdict(deque)

    def check(self, key: str) -> bool:
        """
        True = request may go through to the guard
        False = client is over its budget for the current window
        """
        now = time.time()
        q = self.storage[key]

        # выкидываем запросы за пределами окна
        while q and q[0] <= now - self.window_seconds:
            q.popleft()

        if len(q) >= self.max_requests:
            return False

        q.append(now)
        return True

    def reset(self) -> None:
        self.storage.clear()


rate_limiter = RateLimiter(
    max_requests=settings.RATE_LIMIT_MAX_REQUESTS,
    window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
)
