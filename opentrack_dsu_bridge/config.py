"""Configuration dataclasses for the OpenTrack bridge."""
from dataclasses import dataclass


@dataclass
class BridgeConfig:
    host: str = '127.0.0.1'
    port: int = 4242             # OpenTrack "UDP over network" default
    recv_timeout: float = 0.1    # seconds; bounds how long stop() waits on the listener
    queue_timeout: float = 0.1   # seconds; bounds how long stop() waits on the dispatcher
    buffer_size: int = 65535


@dataclass
class SenderConfig:
    host: str = '127.0.0.1'
    port: int = 4242
    frequency: float = 250.0     # Hz
