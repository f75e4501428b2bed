# -*- coding: utf-8 -*-
"""
Shared pytest fixtures
"""

import sys
import textwrap
from pathlib import Path

import pytest

# put the project root on the Python path
PROJECT_ROOT = Path(__file__).parent.parent.absolute()
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def write_input(tmp_path):
    """Write a dedented puzzle input to a temporary file and return its path"""

    def _write(text: str, name: str = 'input.txt') -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(text).strip('\n') + '\n', encoding='utf-8')
        return path

    return _write
