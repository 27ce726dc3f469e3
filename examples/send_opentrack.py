#!/usr/bin/env python3
"""
Example: Pretend to be OpenTrack and stream a slow head sweep over UDP.

Usage:
    python send_opentrack.py --port 4242 --frequency 250 --seconds 5
"""

import argparse
import math
import os
import sys

# Allow running without installing the package (add project root to path)
_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _root not in sys.path:
    sys.path.insert(0, _root)

from opentrack_dsu_bridge import PoseSample, PoseSender, SenderConfig


def sweep(frequency, seconds, amplitude_deg=30.0, period_s=2.0):
    """Yaw/pitch sine sweep with a small forward/backward lean."""
    n = int(frequency * seconds)
    for i in range(n):
        t = i / frequency
        phase = 2.0 * math.pi * t / period_s
        yield PoseSample(
            x=0.0,
            y=0.0,
            z=2.0 * math.sin(phase),
            yaw=amplitude_deg * math.sin(phase),
            pitch=0.5 * amplitude_deg * math.cos(phase),
            roll=0.0,
        )


def main():
    default_config = SenderConfig()

    parser = argparse.ArgumentParser(description="Stream synthetic OpenTrack poses")
    parser.add_argument("--host", default=default_config.host,
                        help=f"Receiver address (default: {default_config.host})")
    parser.add_argument("--port", type=int, default=default_config.port,
                        help=f"Receiver UDP port (default: {default_config.port})")
    parser.add_argument("--frequency", type=float, default=default_config.frequency,
                        help=f"Send rate in Hz (default: {default_config.frequency})")
    parser.add_argument("--seconds", type=float, default=5.0,
                        help="How long to stream (default: 5.0)")
    args = parser.parse_args()

    print(f"[Main] Streaming to {args.host}:{args.port} at {args.frequency:.0f} Hz...")
    with PoseSender(args.host, args.port, frequency=args.frequency) as sender:
        try:
            sender.stream(sweep(args.frequency, args.seconds))
        except KeyboardInterrupt:
            print("\n[Main] Interrupted")
        finally:
            # Tell the bridge to stop moving
            sender.send_sentinel()
    print("[Main] Done")


if __name__ == "__main__":
    main()
