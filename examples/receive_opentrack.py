#!/usr/bin/env python3
"""
Example: Receive OpenTrack poses and print them, or forward converted deltas.

In OpenTrack, select the "UDP over network" output and point it at the
address below.

Usage:
    python receive_opentrack.py --port 4242
    python receive_opentrack.py --port 4242 --deltas --print_rate
"""

import argparse
import os
import sys
import time

# Allow running without installing the package (add project root to path)
_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _root not in sys.path:
    sys.path.insert(0, _root)

from opentrack_dsu_bridge import BridgeConfig, CallbackTarget, OpenTrackReceiver
from opentrack_dsu_bridge.forwarding import format_pose


def main():
    default_config = BridgeConfig()

    parser = argparse.ArgumentParser(description="Receive OpenTrack poses over UDP")

    parser.add_argument(
        "--host",
        default=default_config.host,
        help=f"IPv4 address to bind (default: {default_config.host})",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=default_config.port,
        help=f"UDP port to listen on (default: {default_config.port})",
    )

    parser.add_argument(
        "--deltas",
        action="store_true",
        default=False,
        help="Print converted motion deltas instead of raw poses",
    )

    parser.add_argument(
        "--print_rate",
        action="store_true",
        default=False,
        help="Print receive rate statistics",
    )

    args = parser.parse_args()
    config = BridgeConfig(host=args.host, port=args.port)

    target = None
    if args.deltas:
        target = CallbackTarget(lambda sample: print(f"[Delta] {format_pose(sample)}"))

    receiver = OpenTrackReceiver(config=config, target=target)
    receiver.start()

    print("[Main] Press Ctrl+C to stop")

    try:
        while True:
            time.sleep(2.0)
            if args.print_rate:
                print(f"[Main] Receive rate: {receiver.get_receive_rate():.1f} Hz, "
                      f"received: {receiver.packets_received}, dropped: {receiver.packets_dropped}")
    except KeyboardInterrupt:
        print("\n[Main] Stopping...")
    finally:
        receiver.stop()
        print("[Main] Done")


if __name__ == "__main__":
    main()
