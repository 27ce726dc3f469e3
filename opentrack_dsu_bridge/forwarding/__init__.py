"""
Forwarding sinks for converted OpenTrack samples.

Provides DebugSink (console output) and ForwardingSink (hands deltas to an
external target such as a DSU server), plus the ForwardingTarget interface.
"""

from .sinks import (
    ForwardingTarget,
    CallbackTarget,
    DebugSink,
    ForwardingSink,
    make_sink,
    format_pose,
)

__all__ = [
    "ForwardingTarget",
    "CallbackTarget",
    "DebugSink",
    "ForwardingSink",
    "make_sink",
    "format_pose",
]
