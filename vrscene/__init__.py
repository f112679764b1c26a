"""Animated VR scene trees, their JSON serialization and UDP datagram exchange."""

__version__ = "0.1.0"