import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from medsearch.settings import get_settings


@pytest.fixture(autouse=True)
def configure_test_env(monkeypatch):
    monkeypatch.delenv("NIL_TOKEN", raising=False)
    monkeypatch.delenv("HEADING_PERIOD_LIMIT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def payload_builder():
    def _builder(summary_csv=None, summary_pdf=None, tests_details=None, sql_command="SELECT 1", **extra):
        detail = {
            "disease_name": extra.pop("disease_name", "Anemia"),
            "summary_csv": summary_csv,
            "summary_pdf": summary_pdf,
            "tests_details": tests_details,
            **extra,
        }
        return {"sql_command": sql_command, "details": [detail]}

    return _builder
