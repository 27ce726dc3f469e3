"""Thread-safe FIFO hand-off between the UDP listener and the dispatcher."""
import threading
from collections import deque
from typing import Deque, Optional

from ..utils.pose_utils import PoseSample


class TransferQueue:
    """Unbounded FIFO of samples; put never blocks, get waits up to a timeout."""

    def __init__(self):
        self.lock = threading.Lock()
        self.not_empty = threading.Condition(self.lock)
        self.items: Deque[PoseSample] = deque()

    def put(self, sample: PoseSample) -> None:
        """Append a sample and wake the consumer."""
        with self.not_empty:
            self.items.append(sample)
            self.not_empty.notify()

    def get(self, timeout: Optional[float] = None) -> Optional[PoseSample]:
        """
        Pop the oldest sample.

        Args:
            timeout: Seconds to wait for an item; 0 polls, None waits forever

        Returns:
            The oldest sample, or None if nothing arrived in time
        """
        with self.not_empty:
            if not self.items and timeout != 0:
                self.not_empty.wait_for(lambda: self.items, timeout=timeout)
            if not self.items:
                return None
            return self.items.popleft()

    def clear(self) -> None:
        with self.lock:
            self.items.clear()

    def __len__(self) -> int:
        with self.lock:
            return len(self.items)
