import socket
import threading
import time

import pytest

from vrscene.client import Client, main
from vrscene.server import GREETING, Server

MESSAGE = b"Test message from server\0"


def _free_udp_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def test_client_receives_what_server_sends():
    port = _free_udp_port()
    with Client(port) as client, Server("127.0.0.1", port) as server:
        sent = server.send_data(MESSAGE)
        received = client.receive(len(MESSAGE))
    assert sent == len(MESSAGE)
    assert received == MESSAGE


def test_client_receives_half_message():
    port = _free_udp_port()
    half = MESSAGE[: len(MESSAGE) // 2]
    with Client(port) as client, Server("127.0.0.1", port) as server:
        server.send_data(half)
        received = client.receive(len(MESSAGE))
    assert len(received) == len(MESSAGE) // 2
    assert received == half


def test_receive_rejects_non_positive_size():
    with Client(_free_udp_port()) as client:
        with pytest.raises(ValueError):
            client.receive(0)


def test_closed_client_cannot_receive():
    with Client(_free_udp_port()) as client:
        pass
    with pytest.raises(OSError):
        client.receive()


def test_main_prints_received_messages(capsys):
    port = _free_udp_port()
    worker = threading.Thread(target=main, args=(["--port", str(port), "--count", "1"],))
    worker.start()
    with Server("127.0.0.1", port) as server:
        deadline = time.monotonic() + 5
        while worker.is_alive() and time.monotonic() < deadline:
            server.send_data(GREETING + b"\0")
            time.sleep(0.05)
    worker.join(timeout=1)
    assert not worker.is_alive()
    assert capsys.readouterr().out.splitlines() == [GREETING.decode()]