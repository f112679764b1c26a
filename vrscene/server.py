"""UDP broadcast server that publishes scene frames."""

from __future__ import annotations

import argparse
import socket
import time
from types import TracebackType

from vrscene.serializer import serialize_to_string
from vrscene.tree_node import TreeNodeHeader

DEFAULT_ADDRESS = "255.255.255.255"
DEFAULT_PORT = 8000
GREETING = b"Hello from server!"


class Server:
    """Sends datagrams to one (usually broadcast) IPv4 address."""

    def __init__(self, address: str = DEFAULT_ADDRESS, port: int = DEFAULT_PORT) -> None:
        try:
            socket.inet_aton(address)
        except OSError as exc:
            raise ValueError(f"Invalid IPv4 address: {address!r}") from exc
        self._target = (address, port)
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        except OSError:
            self._sock.close()
            raise

    def send_data(self, data: bytes) -> int:
        """Send ``data`` as one datagram and return the number of bytes sent."""
        if data is None:
            raise TypeError("Cannot send None")
        return self._sock.sendto(bytes(data), self._target)

    def send_scene(self, scene: TreeNodeHeader) -> int:
        """Serialize ``scene`` to JSON and send it as one datagram."""
        return self.send_data(serialize_to_string(scene).encode("utf-8"))

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> Server:
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Broadcast a greeting once a second.")
    parser.add_argument("address", help="local broadcast IPv4 address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--count", type=int, default=None, help="messages to send (default: forever)")
    parser.add_argument("--interval", type=float, default=1.0, help="seconds between messages")
    args = parser.parse_args(argv)

    with Server(args.address, args.port) as server:
        sent = 0
        while args.count is None or sent < args.count:
            server.send_data(GREETING)
            print("Message sent")
            sent += 1
            if args.count is None or sent < args.count:
                time.sleep(args.interval)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())