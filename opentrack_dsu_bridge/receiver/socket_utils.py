"""
Socket helpers for the OpenTrack listener.

On Windows a UDP socket reports an ICMP "port unreachable" from an earlier
send as WSAECONNRESET on the next receive. SIO_UDP_CONNRESET turns that
notification off. Other platforms have no such control, so it is a no-op.
"""

import ctypes
import socket
import sys

# IOC_IN | IOC_VENDOR | 12
SIO_UDP_CONNRESET = 0x80000000 | 0x18000000 | 12


def open_udp_socket(host: str, port: int, timeout: float) -> socket.socket:
    """
    Create an IPv4 UDP socket bound to (host, port) with address reuse.

    Raises:
        OSError: If the address is invalid or cannot be bound
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.settimeout(timeout)
    except OSError:
        sock.close()
        raise
    return sock


def suppress_transport_reset(sock: socket.socket) -> bool:
    """
    Stop the socket from reporting connection resets on receive.

    socket.ioctl() only accepts a fixed set of commands, so WSAIoctl is
    called directly.

    Returns:
        True if the control was applied, False where unsupported
    """
    if sys.platform != "win32":
        return False
    enabled = ctypes.c_uint32(0)
    returned = ctypes.c_uint32(0)
    result = ctypes.windll.ws2_32.WSAIoctl(
        ctypes.c_size_t(sock.fileno()),
        ctypes.c_uint32(SIO_UDP_CONNRESET),
        ctypes.byref(enabled), ctypes.sizeof(enabled),
        None, 0,
        ctypes.byref(returned),
        None, None,
    )
    return result == 0
