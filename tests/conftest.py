from collections.abc import Generator

import pytest

from esperanto_text.tables import clear_table_cache

# Plain English: no diacritics, no x/h digraphs, no "au"
PANGRAM = "The quick brown fox jumps over the lazy dog. And my axe."


@pytest.fixture(autouse=True)
def fresh_tables() -> Generator[None, None, None]:
    """Rebuild conversion tables for every test."""
    clear_table_cache()
    yield
    clear_table_cache()


@pytest.fixture
def pangram() -> str:
    return PANGRAM
