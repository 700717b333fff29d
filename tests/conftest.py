import socket

import pytest

from static_server.pages import generate_server_files


@pytest.fixture
def static_root(tmp_path):
    root = tmp_path / "wwwroot"
    generate_server_files(root)
    return root


@pytest.fixture
def free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]
