"""
PoseReader - OpenTrack UDP datagram parser.

OpenTrack's "UDP over network" output sends one datagram per pose: six
little-endian float64 values in the order x, y, z, yaw, pitch, roll.
"""

import struct

from ..utils.pose_utils import PoseSample

POSE_FORMAT = "<6d"
POSE_SIZE = struct.calcsize(POSE_FORMAT)  # 48 bytes


class PoseReader:
    """
    Tiny reader for a single OpenTrack pose datagram.

    Example usage:
        data, _addr = sock.recvfrom(65535)
        reader = PoseReader(data)
        sample = reader.read_pose()
    """

    def __init__(self, data: bytes, size: int = None):
        """
        Args:
            data: Raw bytes from the UDP packet
            size: Number of valid bytes in data (default: len(data))
        """
        self.data = data
        self.n = len(data) if size is None else size

    def read_pose(self) -> PoseSample:
        """
        Parse the datagram. Bytes past the first 48 are ignored.

        Raises:
            ValueError: If fewer than 48 bytes are available
        """
        if self.n < POSE_SIZE:
            raise ValueError(f"OpenTrack datagram truncated ({self.n} < {POSE_SIZE})")
        x, y, z, yaw, pitch, roll = struct.unpack_from(POSE_FORMAT, self.data, 0)
        return PoseSample(x=x, y=y, z=z, yaw=yaw, pitch=pitch, roll=roll)


def read_pose(data: bytes, size: int = None):
    """
    Parse an OpenTrack datagram.

    Returns:
        PoseSample, or None if the datagram is shorter than 48 bytes
    """
    reader = PoseReader(data, size)
    if reader.n < POSE_SIZE:
        return None
    return reader.read_pose()


def write_pose(sample: PoseSample) -> bytes:
    """Encode a sample as a 48-byte OpenTrack datagram."""
    return struct.pack(POSE_FORMAT, *sample.as_tuple())
