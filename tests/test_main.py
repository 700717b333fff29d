import pytest

from static_server.__main__ import main, parse_args


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for key in ["HttpListenerPort", "HttpListenerHost", "ServerStaticFilesDirectory", "GenServerFiles"]:
        monkeypatch.delenv(key, raising=False)


def test_parse_args_defaults():
    args = parse_args([])

    assert args.port is None
    assert args.dir is None
    assert args.no_gen is False
    assert args.log_level == "info"


def test_missing_root_exits_with_error(tmp_path):
    assert main(["--no-gen", "--content-root", str(tmp_path)]) == 1
    assert not (tmp_path / "wwwroot").exists()


def test_invalid_port_exits_with_error():
    assert main(["--port", "70000"]) == 1


def test_settings_file_read_from_content_root(tmp_path, monkeypatch):
    site = tmp_path / "site"
    site.mkdir()
    (site / "appsettings.json").write_text('{"HttpListenerPort": 9123}')
    started = []

    class RecordingServer:
        def __init__(self, config, content_root=None, log_level="info"):
            started.append((config, content_root))

        async def start(self, cancel_event=None):
            pass

    monkeypatch.setattr("static_server.__main__.HttpServer", RecordingServer)

    assert main(["--content-root", str(site)]) == 0
    config, content_root = started[0]
    assert config.listen_port == 9123
    assert content_root == str(site)
