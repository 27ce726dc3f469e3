import os
import socket
import sys
import time

# Allow running without installing the package (add project root to path)
_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _root not in sys.path:
    sys.path.insert(0, _root)


def wait_until(predicate, timeout=2.0, interval=0.005):
    """Poll predicate until it is true or timeout seconds pass."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()


class FakeClock:
    """Returns preset timestamps, one per call."""

    def __init__(self, *times):
        self.times = list(times)

    def __call__(self):
        return self.times.pop(0)


class ScriptedSocket:
    """
    Stand-in UDP socket replaying a fixed list of receive results.

    Each item is either datagram bytes or an exception instance to raise.
    Once the script is used up, recvfrom behaves like a receive timeout.
    """

    def __init__(self, script, timeout=0.01):
        self.script = list(script)
        self.timeout = timeout
        self.closed = False

    def recvfrom(self, _bufsize):
        if not self.script:
            time.sleep(self.timeout)
            raise socket.timeout("timed out")
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item, ("127.0.0.1", 4242)

    def getsockname(self):
        return ("127.0.0.1", 4242)

    def close(self):
        self.closed = True
