"""
PoseSender - Emits OpenTrack pose datagrams over UDP.

Stands in for OpenTrack when testing a bridge: each sample is encoded in the
48-byte OpenTrack layout and sent to the receiver's address.
"""

import socket

from loop_rate_limiters import RateLimiter

from ..utils.pose_utils import PoseSample
from ..receiver.packet_reader import write_pose


class PoseSender:
    """
    Sends PoseSamples to an OpenTrack receiver.

    Example:
        with PoseSender("127.0.0.1", 4242, frequency=250) as sender:
            sender.stream(samples)
            sender.send_sentinel()
    """

    def __init__(self, host: str = "127.0.0.1", port: int = 4242, frequency: float = 250.0):
        """
        Args:
            host: Receiver IPv4 address
            port: Receiver UDP port
            frequency: Send rate used by stream(), in Hz
        """
        self.address = (host, port)
        self.frequency = frequency
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self.sent_count = 0

    def send(self, sample: PoseSample):
        self.sock.sendto(write_pose(sample), self.address)
        self.sent_count += 1

    def send_raw(self, data: bytes):
        """Send arbitrary bytes, e.g. a truncated datagram."""
        self.sock.sendto(data, self.address)

    def send_sentinel(self):
        """Send the all-zero "no motion" datagram."""
        self.send(PoseSample())

    def stream(self, samples):
        """Send samples one by one at the configured frequency."""
        rate_limiter = RateLimiter(frequency=self.frequency, warn=False)
        for sample in samples:
            self.send(sample)
            rate_limiter.sleep()

    def close(self):
        if self.sock is not None:
            self.sock.close()
            self.sock = None
            print(f"[PoseSender] Closed after {self.sent_count} samples")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
