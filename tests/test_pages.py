from __future__ import annotations

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

ROOT = Path(__file__).resolve().parent.parent
PAGES = ["Home.py"] + sorted(f"pages/{p.name}" for p in (ROOT / "pages").glob("*.py"))


@pytest.mark.parametrize("script", PAGES)
def test_page_renders_without_exception(script) -> None:
    at = AppTest.from_file(str(ROOT / script))
    at.run(timeout=30)
    assert not at.exception
