"""
OpenTrack DSU Bridge - OpenTrack head tracking to motion-controller input.

This package receives 6-DOF poses from OpenTrack over UDP and converts them
into motion deltas for a DSU (cemuhook) style gyroscope/accelerometer server.

Main classes:
    - OpenTrackReceiver: Receives poses, converts and forwards them
    - PoseDiffer: Turns absolute poses into rate-scaled deltas
    - PoseSender: Emits OpenTrack datagrams (testing and demos)

Example usage:
    from opentrack_dsu_bridge import OpenTrackReceiver, CallbackTarget

    # Forward converted deltas to your DSU server
    target = CallbackTarget(dsu_server.send_motion,
                            on_start=dsu_server.start, on_stop=dsu_server.stop)
    receiver = OpenTrackReceiver(host="127.0.0.1", port=4242, target=target)

    receiver.start()
    try:
        while True:
            time.sleep(1.0)
    finally:
        receiver.stop()

Without a target the receiver prints every raw pose to the console.
"""

from .config import BridgeConfig, SenderConfig
from .forwarding import ForwardingTarget, CallbackTarget, DebugSink, ForwardingSink
from .receiver import OpenTrackReceiver, PoseReader, TransferQueue, read_pose, write_pose
from .sender import PoseSender
from .utils import PoseSample, DifferState, PoseDiffer, diff_pose

__version__ = "0.1.0"
__all__ = [
    "BridgeConfig",
    "SenderConfig",
    "OpenTrackReceiver",
    "PoseReader",
    "TransferQueue",
    "read_pose",
    "write_pose",
    "ForwardingTarget",
    "CallbackTarget",
    "DebugSink",
    "ForwardingSink",
    "PoseSender",
    "PoseSample",
    "DifferState",
    "PoseDiffer",
    "diff_pose",
]
