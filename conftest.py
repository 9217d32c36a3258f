"""
Pytest configuration for project root.

Ensures project modules can be imported in tests.
Provides shared page fixtures for the translation text tests.
"""

import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def sample_pages():
    """Four pages: a clean page, a sentence over a page break, a footnote-free page."""
    return [
        {"page": 1, "text": "النص الأول.", "footnotes": "الحاشية الأولى."},
        {"page": 2, "text": "نص غير مكتمل", "footnotes": "حاشية غير مكتملة"},
        {"page": 3, "text": "مكمل للنص!", "footnotes": "مكملة للحاشية؟"},
        {"page": 4, "text": "نص منفصل.", "footnotes": ""},
    ]


@pytest.fixture
def tmp_home(tmp_path, monkeypatch):
    """Point MAKHTUT_HOME at a temporary directory and reset the config cache."""
    from infra.config import get_config

    home = tmp_path / "makhtut"
    monkeypatch.setenv("MAKHTUT_HOME", str(home))
    get_config.cache_clear()
    yield home
    get_config.cache_clear()
