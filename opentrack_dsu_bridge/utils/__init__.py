"""
Utility functions for OpenTrack pose processing.

This module provides:
    - pose_utils: PoseSample/DifferState values and the pose differencing
      transform (diff_pose, PoseDiffer)
"""

from .pose_utils import PoseSample, DifferState, PoseDiffer, diff_pose

__all__ = [
    "PoseSample",
    "DifferState",
    "PoseDiffer",
    "diff_pose",
]
