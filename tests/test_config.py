# tests/test_config.py
import pytest
from pathlib import Path
from grade_tracker.main import main, build_parser
from grade_tracker.config import AppConfig

def test_defaults():
    config = AppConfig.from_env({})
    assert config.data_file == Path("students.txt")
    assert config.log_level == "INFO"

def test_from_env_and_overrides():
    config = AppConfig.from_env({"GRADE_TRACKER_FILE": "data/roster.txt", "GRADE_TRACKER_LOG_LEVEL": "debug"})
    assert config.data_file == Path("data/roster.txt")
    assert config.log_level == "DEBUG"

    overridden = config.with_overrides(data_file="other.txt")
    assert overridden.data_file == Path("other.txt")
    assert overridden.log_level == "DEBUG"

def test_unknown_env_log_level_falls_back_to_info():
    with pytest.warns(UserWarning, match="VERBOSE"):
        config = AppConfig.from_env({"GRADE_TRACKER_LOG_LEVEL": "verbose"})
    assert config.log_level == "INFO"

def test_unknown_cli_log_level_is_rejected(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--cli", "--log-level", "nope"])
    assert exc_info.value.code == 2
    assert "--log-level" in capsys.readouterr().err

def test_cli_log_level_is_case_insensitive():
    assert build_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"
