import time

from sitecanvas.domain.exceptions import OperationTimeout


class Deadline:
    """Time budget for one publish or render, checked at safe points."""

    def __init__(self, seconds, *, clock=time.monotonic):
        self._clock = clock
        self.seconds = seconds
        self._expires_at = None if seconds is None else clock() + seconds

    @property
    def expired(self) -> bool:
        return self._expires_at is not None and self._clock() >= self._expires_at

    def check(self, operation: str) -> None:
        if self.expired:
            raise OperationTimeout(f"{operation} exceeded its {self.seconds}s budget")
