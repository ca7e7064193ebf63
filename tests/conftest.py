import logging
import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from name_formatter.config import NameConfig  # noqa: E402


@pytest.fixture
def config_data():
    return {
        "settings": {"sep1": " ", "sep2": ", ", "sep3": "", "markup": "none"},
        "formats": {
            "default": {"label": "Default", "pattern": "((((t+ig)+im)+if)+is)+jc"},
            "test_formal": {"label": "Formal", "pattern": "t+if"},
            "test_family": {"label": "Family Only", "pattern": "if"},
        },
        "list_formats": {
            "default": {"delimiter": ", ", "and": "text", "delimiter_precedes_last": "never"},
            "et_al_test": {
                "delimiter": "; ",
                "and": "text",
                "delimiter_precedes_last": "always",
                "el_al_min": 2,
                "el_al_first": 1,
            },
        },
    }


@pytest.fixture
def name_config(config_data):
    return NameConfig(config_data)


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config file and return its path."""
    def _write(text: str) -> Path:
        path = tmp_path / "name_formatter.yml"
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def restore_logging():
    """Put the default console logging back after tests that reconfigure it."""
    yield
    from name_formatter.logging import logger as logger_module

    logger_module._install(logging.getLogger(logger_module.BASE_LOGGER_NAME), logging.INFO)
