"""Talking to and supervising the g13d daemon."""

from .channel import DaemonChannel, FifoChannel, wait_for_channel
from .process import DaemonProcess

__all__ = [
    "DaemonChannel",
    "DaemonProcess",
    "FifoChannel",
    "wait_for_channel",
]
