from pathlib import Path

import pytest


@pytest.fixture
def cookies_path() -> Path | None:
    """Provide the path to a cookies.txt file if one sits next to these tests.

    Exported browser cookies make YouTube less likely to block the test
    machine.

    Returns:
        Path to cookies.txt file if it exists, None otherwise.
    """
    cookies_file = Path(__file__).parent / "cookies.txt"
    return cookies_file if cookies_file.exists() else None
