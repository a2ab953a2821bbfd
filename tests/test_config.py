import logging
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from rotorlab.config import Settings, load_settings
from rotorlab.logging_config import setup_logging
from rotorlab.machine.factory import default_machine
from rotorlab.utils.repro import state_path


_ENV_VARS = [
    "ROTORLAB_BLOCK_SIZE",
    "ROTORLAB_STATE_DIR",
    "ROTORLAB_LOG_LEVEL",
    "ROTORLAB_LOG_FILE",
    "GLOBAL_SEED",
    "ROTORLAB_ROUNDTRIP_VECTORS",
]


@pytest.fixture
def clean_settings(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    load_settings.cache_clear()
    yield monkeypatch
    load_settings.cache_clear()


def test_defaults(clean_settings):
    s = load_settings()
    assert s.block_size == 5
    assert s.state_dir == "state"
    assert s.log_level == "WARNING"
    assert s.log_file is None
    assert s.global_seed == 1337
    assert s.roundtrip_vectors == 200


def test_env_overrides(clean_settings):
    clean_settings.setenv("ROTORLAB_BLOCK_SIZE", "4")
    clean_settings.setenv("ROTORLAB_LOG_LEVEL", " debug ")
    clean_settings.setenv("GLOBAL_SEED", "42")
    s = load_settings()
    assert s.block_size == 4
    assert s.log_level == "DEBUG"
    assert s.global_seed == 42


def test_settings_are_cached(clean_settings):
    assert load_settings() is load_settings()


def test_block_size_changes_grouping(clean_settings):
    clean_settings.setenv("ROTORLAB_BLOCK_SIZE", "4")
    assert default_machine().encipher("THIS IS A TEST") == "QCTB GIJS WIH"


@pytest.mark.parametrize("size", [0, 27])
def test_block_size_bounds(size):
    with pytest.raises(ValidationError):
        Settings(block_size=size)


def test_state_path():
    assert state_path("state", "my machine/1") == Path("state") / "my_machine_1.json"


def test_setup_logging(clean_settings, tmp_path):
    log_file = tmp_path / "rotorlab.log"
    logger = setup_logging("INFO", str(log_file))
    try:
        assert logger.name == "rotorlab"
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 2

        # calling again replaces handlers rather than stacking them
        logger = setup_logging("DEBUG")
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert "Logging initialized." in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


def test_setup_logging_uses_settings(clean_settings):
    clean_settings.setenv("ROTORLAB_LOG_LEVEL", "ERROR")
    logger = setup_logging()
    try:
        assert logger.level == logging.ERROR
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
