"""
OpenTrackReceiver - Real-time OpenTrack pose receiver over UDP.

Example usage:
    from opentrack_dsu_bridge.receiver import OpenTrackReceiver

    receiver = OpenTrackReceiver(host="127.0.0.1", port=4242)
    receiver.start()    # prints every raw pose (debug mode)
    ...
    receiver.stop()

Datagram format (OpenTrack "UDP over network"):
    6 x little-endian float64 -> x, y, z, yaw, pitch, roll (48 bytes)
    An all-zero datagram means "no motion" and resets the differ.
"""

from .opentrack_receiver import OpenTrackReceiver
from .packet_reader import PoseReader, read_pose, write_pose, POSE_SIZE
from .socket_utils import open_udp_socket, suppress_transport_reset
from .transfer_queue import TransferQueue

__all__ = [
    "OpenTrackReceiver",
    "PoseReader",
    "read_pose",
    "write_pose",
    "POSE_SIZE",
    "TransferQueue",
    "open_udp_socket",
    "suppress_transport_reset",
]
