# tests/conftest.py
from __future__ import annotations
import sys
from pathlib import Path
import pytest

# Ensure repo root is importable (so `import simplex_noise` and `import noise_probe` work on CI)
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from simplex_noise import SimplexNoise  # noqa: E402


@pytest.fixture(scope="session")
def generator():
    return SimplexNoise.from_seed(101)
