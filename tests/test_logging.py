import logging

import pytest

from tweenkit import logs
from tweenkit.errors import ProgramStateError
from tweenkit.program import Program


def _read(tmp_path):
    return (tmp_path / "tweenkit.log").read_text(encoding="utf-8")


def test_rejected_start_is_logged(tmp_path):
    with pytest.raises(ProgramStateError):
        Program([]).start()
    assert "Rejected start(): program has no steps" in _read(tmp_path)


def test_log_action_writes_formatted_record(tmp_path):
    logs.log_action("hello")
    text = _read(tmp_path)
    assert "tweenkit - INFO - hello" in text


def test_level_filters_records(tmp_path):
    logs.configure_logging(str(tmp_path / "tweenkit.log"), "WARNING")
    try:
        logs.log_action("quiet")
        logging.getLogger("tweenkit.program").warning("loud")
        text = _read(tmp_path)
        assert "quiet" not in text
        assert "loud" in text
    finally:
        logs.configure_logging(str(tmp_path / "tweenkit.log"))


def test_unknown_level_falls_back_to_info(tmp_path):
    logger = logs.configure_logging(str(tmp_path / "tweenkit.log"), "chatty")
    assert logger.level == logging.INFO


def test_reconfigure_replaces_file_handler(tmp_path):
    other = tmp_path / "other.log"
    logger = logs.configure_logging(str(other))
    handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(handlers) == 1
    assert handlers[0].baseFilename == str(other)
    logs.log_action("moved")
    assert "moved" in other.read_text(encoding="utf-8")


def test_import_does_not_attach_file_handler(tmp_path):
    import os
    import subprocess
    import sys

    src = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
    env = dict(os.environ, PYTHONPATH=src, SDL_VIDEODRIVER="dummy", SDL_AUDIODRIVER="dummy",
               PYGAME_HIDE_SUPPORT_PROMPT="1")
    code = (
        "import logging, tweenkit\n"
        "logging.basicConfig()\n"
        "lg = logging.getLogger('tweenkit')\n"
        "lg.warning('from host')\n"
        "print(sum(isinstance(h, logging.FileHandler) for h in lg.handlers), lg.propagate)\n"
    )
    result = subprocess.run([sys.executable, "-c", code], cwd=tmp_path, env=env,
                            capture_output=True, text=True, check=True)
    assert result.stdout.split() == ["0", "True"]
    assert "from host" in result.stderr
    assert not (tmp_path / "tweenkit.log").exists()
