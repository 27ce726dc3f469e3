"""
Sender module for opentrack_dsu_bridge.

Provides PoseSender for emitting OpenTrack datagrams (testing and demos).
"""

from .pose_sender import PoseSender

__all__ = ["PoseSender"]
