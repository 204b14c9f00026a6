import socket

import pytest

from exchanger import main


def test_run_exits_with_status_1_when_port_is_taken(caplog):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        sock.listen(1)
        port = sock.getsockname()[1]

        with caplog.at_level("INFO"):
            with pytest.raises(SystemExit) as ei:
                main.run(host="127.0.0.1", port=port)

    assert ei.value.code == 1
    assert "Failed to start server" in caplog.text
