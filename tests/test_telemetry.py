from __future__ import annotations

import pytest

from rawedit.runtime import telemetry


def test_configure_rejects_config_and_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="production")


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_loggers_are_cached_per_name() -> None:
    first = telemetry.get_logger("rawedit.tests")

    assert telemetry.get_logger("rawedit.tests") is first


def test_span_reraises_and_records_failure() -> None:
    with pytest.raises(KeyError):
        with telemetry.span("tests::fail", component=True, metadata={"k": b"\x1b"}):
            raise KeyError("missing")


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("tests.event", level="loud")
