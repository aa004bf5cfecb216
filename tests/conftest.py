from pathlib import Path

import pytest

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / 'examples'


@pytest.fixture
def example_source():
    def read(name: str) -> str:
        with open(EXAMPLES_DIR / name, 'r', encoding='utf-8') as f:
            return f.read()
    return read
