"""UDP client that listens for datagrams broadcast by the server."""

from __future__ import annotations

import argparse
import socket
from types import TracebackType

DEFAULT_PORT = 8000
BUFFER_SIZE = 1024


class Client:
    """Receives datagrams on a port shared with other clients."""

    def __init__(self, port: int = DEFAULT_PORT) -> None:
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            reuse_port = getattr(socket, "SO_REUSEPORT", None)
            if reuse_port is not None:
                self._sock.setsockopt(socket.SOL_SOCKET, reuse_port, 1)
            else:
                self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._sock.bind(("", port))
        except OSError:
            self._sock.close()
            raise

    def receive(self, size: int = BUFFER_SIZE) -> bytes:
        """Block until a datagram arrives and return at most ``size`` bytes of it."""
        if size <= 0:
            raise ValueError("Receive size must be positive")
        return self._sock.recv(size)

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print datagrams received from the server.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--count", type=int, default=None, help="messages to receive (default: forever)")
    args = parser.parse_args(argv)

    with Client(args.port) as client:
        received = 0
        while args.count is None or received < args.count:
            payload = client.receive(BUFFER_SIZE)
            text = payload.split(b"\0", 1)[0].decode("utf-8", errors="replace")
            print(text, flush=True)
            received += 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())