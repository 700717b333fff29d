import pytest

from static_server.errors import BootstrapFailure
from static_server.pages import CONTACTS_PAGE, INDEX_PAGE, generate_server_files


def test_generates_exactly_two_pages(tmp_path):
    root = tmp_path / "wwwroot"
    generate_server_files(root)

    assert sorted(p.name for p in root.iterdir()) == ["contacts.html", "index.html"]
    assert (root / "index.html").read_text(encoding="utf-8") == INDEX_PAGE
    assert (root / "contacts.html").read_text(encoding="utf-8") == CONTACTS_PAGE


def test_page_content():
    assert "Hello, world!" in INDEX_PAGE
    for i in range(1, 6):
        assert f"<li>Contact {i}</li>" in CONTACTS_PAGE
    assert "Contact 6" not in CONTACTS_PAGE


def test_write_failure(tmp_path, caplog):
    blocker = tmp_path / "wwwroot"
    blocker.write_text("not a directory")

    with pytest.raises(BootstrapFailure):
        generate_server_files(blocker)
    assert any(r.levelname == "CRITICAL" for r in caplog.records)
