"""
Placeholder pages written when the static root does not exist yet.
"""

import logging
from pathlib import Path
from typing import Dict

from .errors import BootstrapFailure

logger = logging.getLogger(__name__)

INDEX_PAGE = """<!DOCTYPE html>

<html lang="en">
    <head>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>Document</title>
    </head>

    <body>
        <nav>
            <a href="/index.html">Home</a> |
            <a href="/contacts.html">Contacts</a>
        </nav>

        <h1>Hello, world!</h1>
    </body>
</html>"""

CONTACTS_PAGE = """<!DOCTYPE html>

<html lang="en">
    <head>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>Document</title>
    </head>

    <body>
        <nav>
            <a href="/index.html">Home</a> |
            <a href="/contacts.html">Contacts</a>
        </nav>

        <h1>Contact list:</h1>

        <ul>
            <li>Contact 1</li>
            <li>Contact 2</li>
            <li>Contact 3</li>
            <li>Contact 4</li>
            <li>Contact 5</li>
        </ul>
    </body>
</html>"""

SERVER_FILES: Dict[str, str] = {
    "index.html": INDEX_PAGE,
    "contacts.html": CONTACTS_PAGE,
}


def generate_server_files(static_root: Path) -> None:
    """Create the static root and write the placeholder pages into it"""
    static_root = Path(static_root)
    try:
        static_root.mkdir(parents=True, exist_ok=True)
        for name, content in SERVER_FILES.items():
            (static_root / name).write_text(content, encoding="utf-8")
    except OSError as e:
        logger.critical("A fatal error occurred while generating the server files. Exception: %s", e)
        raise BootstrapFailure(str(e)) from e

    logger.info("Generated %d placeholder pages in %s", len(SERVER_FILES), static_root)
