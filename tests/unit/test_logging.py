"""Unit tests for the CLI logging helpers."""

import logging

import pytest

from voxels.logging import config_flight_recorder, log_startup, tag_origin


def make_record(name: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "origin"),
    [
        ("voxels.service_layer.applications", ""),
        ("dbus_fast.aio.message_bus", "[dbus_fast] "),
        ("asyncio", "[asyncio] "),
    ],
)
def test_tag_origin(name: str, origin: str) -> None:
    record = make_record(name)
    assert tag_origin(record) is True
    assert record.origin == origin


def test_flight_recorder_dumps_on_warning(tmp_path) -> None:
    path = tmp_path / "logs" / "latest.log"
    recorder = config_flight_recorder(path)
    try:
        recorder.handle(make_record("voxels.test", logging.DEBUG))
        assert not path.exists()

        recorder.handle(make_record("voxels.test", logging.WARNING))
    finally:
        recorder.close()
        recorder.target.close()

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert "DEBUG voxels.test" in lines[0]
    assert "WARNING voxels.test" in lines[1]


def test_log_startup_reports_setup(caplog: pytest.LogCaptureFixture, tmp_path) -> None:
    logger = logging.getLogger("voxels.test")
    with caplog.at_level(logging.DEBUG, logger="voxels.test"):
        log_startup(
            logger,
            app_version="9.9.9",
            level=logging.WARNING,
            log_path=tmp_path / "latest.log",
            logger_levels={"dbus_fast": logging.ERROR},
        )

    assert "VOXELS 9.9.9 (console=WARNING" in caplog.text
    assert "latest.log" in caplog.text
    assert "dbus-fast:" in caplog.text
    assert "dbus_fast=ERROR" in caplog.text
