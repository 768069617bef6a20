from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _reset_runtime_cache():
    import src.cli.runtime as runtime

    runtime.set_runtime(None)
    yield
    runtime.set_runtime(None)
