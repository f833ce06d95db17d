from pathlib import Path

from slalom import logging_config
from slalom.context import AppContext


def test_configure_from_context_passes_settings(tmp_path: Path, monkeypatch):
    calls = []
    monkeypatch.setattr(logging_config, "configure_logging", lambda **kwargs: calls.append(kwargs))

    context = AppContext(base_dir=tmp_path, log_level="WARNING", json_logs=True, log_dir=tmp_path / "logs")
    logging_config.configure_from_context(context)

    assert calls == [
        {
            "level": "WARNING",
            "json_output": True,
            "log_file": tmp_path / "logs" / "slalom.log",
            "colors": False,
        }
    ]


def test_verbose_forces_debug(tmp_path: Path, monkeypatch):
    calls = []
    monkeypatch.setattr(logging_config, "configure_logging", lambda **kwargs: calls.append(kwargs))

    logging_config.configure_from_context(AppContext(base_dir=tmp_path), verbose=True)

    assert calls[0]["level"] == "DEBUG"
    assert calls[0]["log_file"] is None
    assert calls[0]["colors"] is True


def test_get_logger_emits_structured_events():
    from structlog.testing import capture_logs

    with capture_logs() as logs:
        logging_config.get_logger("slalom.test").info("hello", answer=42)

    assert logs == [{"event": "hello", "answer": 42, "log_level": "info"}]


def test_reconfiguring_closes_previous_log_file(tmp_path: Path):
    import logging

    log_file = tmp_path / "logs" / "slalom.log"
    root = logging.getLogger()
    try:
        logging_config.configure_logging(json_output=True, log_file=log_file)
        file_handler = root.handlers[0]
        logging_config.get_logger("slalom.test").warning("to_file", n=1)

        logging_config.configure_logging(json_output=True, log_file=tmp_path / "other.log")

        assert file_handler.stream is None
        assert '"event": "to_file"' in log_file.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()


def test_default_logging_targets_stderr(capsys):
    logging_config.reset_logging()
    logging_config.get_logger("slalom.test").error("boom", code=7)

    captured = capsys.readouterr()
    assert "boom" in captured.err
    assert captured.out == ""
