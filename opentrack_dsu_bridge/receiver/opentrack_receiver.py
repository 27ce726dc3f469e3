"""
OpenTrackReceiver - Real-time OpenTrack to motion-controller bridge.

This module provides the OpenTrackReceiver class, which receives OpenTrack
pose datagrams over UDP, converts them into motion deltas and forwards them
in order to a sink. Network receipt and forwarding run in two background
threads joined by a transfer queue.
"""

import socket
import threading
import time

from ..config import BridgeConfig
from ..forwarding.sinks import make_sink
from ..utils.pose_utils import PoseDiffer
from .packet_reader import read_pose
from .socket_utils import open_udp_socket, suppress_transport_reset
from .transfer_queue import TransferQueue


class OpenTrackReceiver:
    """
    Receives OpenTrack poses and forwards converted samples in two threads.

    The data flow:
    1. The listener thread receives one UDP datagram at a time
    2. Datagrams shorter than 48 bytes are dropped
    3. In forwarding mode each pose goes through the PoseDiffer; in debug mode
       the raw absolute pose is kept
    4. Samples are queued in arrival order
    5. The dispatcher thread hands each queued sample to the sink

    Example usage:
        receiver = OpenTrackReceiver(host="127.0.0.1", port=4242, target=dsu_server)
        receiver.start()
        ...
        receiver.stop()

    Without a target, samples are printed to the console for debugging.

    start() while running and stop() while stopped raise RuntimeError.
    """

    def __init__(self, host: str = None, port: int = None, target=None,
                 config: BridgeConfig = None, printer=print, clock=time.monotonic):
        """
        Initialize the OpenTrackReceiver.

        Args:
            host: IPv4 address to bind (default: config.host)
            port: UDP port to bind, 0 for an ephemeral port (default: config.port)
            target: Forwarding target with start/stop/send; None selects debug mode
            config: BridgeConfig with timeouts and buffer size
            printer: Output function for debug mode (default: print)
            clock: Monotonic time source used by the differ
        """
        self.config = config or BridgeConfig()
        self.host = self.config.host if host is None else host
        self.port = self.config.port if port is None else port
        self.sink = make_sink(target, printer=printer)
        self.clock = clock

        self.sock = None
        self.running = False
        self.listener_thread = None
        self.dispatch_thread = None
        self.queue = TransferQueue()
        self.differ = None

        self.packets_received = 0
        self.packets_dropped = 0
        self.recv_count = 0
        self.last_rate_time = time.time()
        self.recv_rate_hz = 0.0

    @property
    def debug(self) -> bool:
        """True when no forwarding target was configured."""
        return not self.sink.wants_deltas

    @property
    def address(self):
        """Bound (host, port) while running, else None."""
        if self.sock is None:
            return None
        return self.sock.getsockname()

    def start(self):
        """
        Bind the socket and start the listener and dispatcher threads.

        Raises:
            RuntimeError: If already running
            OSError: If the socket cannot be bound
        """
        if self.running:
            raise RuntimeError("OpenTrackReceiver is already running")

        self.sock = open_udp_socket(self.host, self.port, self.config.recv_timeout)
        self.queue.clear()
        self.differ = PoseDiffer(clock=self.clock)
        self.packets_received = 0
        self.packets_dropped = 0
        self.recv_count = 0
        self.last_rate_time = time.time()
        self.recv_rate_hz = 0.0

        self.running = True
        self.listener_thread = threading.Thread(target=self._listen_loop, daemon=True)
        self.dispatch_thread = threading.Thread(target=self._dispatch_loop, daemon=True)
        self.listener_thread.start()
        self.dispatch_thread.start()

        host, port = self.address
        print(f"[OpenTrackReceiver] Listening on {host}:{port}")

    def stop(self):
        """
        Stop both threads, release the forwarding target and close the socket.

        Raises:
            RuntimeError: If not running
        """
        if not self.running:
            raise RuntimeError("OpenTrackReceiver is not running")

        self.running = False
        self.listener_thread.join()
        self.dispatch_thread.join()
        self.listener_thread = None
        self.dispatch_thread = None

        self.sock.close()
        self.sock = None
        self.differ = None
        print("[OpenTrackReceiver] Stopped")

    def is_running(self) -> bool:
        return self.running

    def get_receive_rate(self):
        """
        Get the current packet receive rate.

        Returns:
            Receive rate in Hz (packets per second)
        """
        return self.recv_rate_hz

    def _listen_loop(self):
        """Background thread: receive, parse, convert and queue poses."""
        sock = self.sock
        buffer_size = self.config.buffer_size

        while self.running:
            try:
                data, _addr = sock.recvfrom(buffer_size)
            except socket.timeout:
                continue
            except ConnectionResetError:
                # A previous send hit an unreachable peer (Windows reports it here)
                suppress_transport_reset(sock)
                self.differ.reset_baseline()
                print("[OpenTrackReceiver] Connection reset reported, baseline cleared")
                continue
            except OSError as e:
                if not self.running:
                    break
                print(f"[OpenTrackReceiver] Receive error: {e}")
                continue

            sample = read_pose(data)
            if sample is None:
                self.packets_dropped += 1
                continue
            self.packets_received += 1
            self._update_rate()

            if self.sink.wants_deltas:
                sample = self.differ.process(sample)
            self.queue.put(sample)

    def _dispatch_loop(self):
        """Background thread: hand queued samples to the sink in order."""
        self.sink.start()
        try:
            while self.running:
                sample = self.queue.get(timeout=self.config.queue_timeout)
                if sample is None:
                    continue
                self.sink.emit(sample)
        finally:
            self.sink.stop()

    def _update_rate(self):
        self.recv_count += 1
        now = time.time()
        dt = now - self.last_rate_time
        if dt >= 1.0:
            self.recv_rate_hz = self.recv_count / dt
            self.recv_count = 0
            self.last_rate_time = now
