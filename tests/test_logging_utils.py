from __future__ import annotations
import pytest
from gridbarrier.utils.logging_utils import StageTimer, log, set_quiet


def test_stage_timer_logs_start_and_done(capsys):
    set_quiet(False)
    with StageTimer("stamp") as t:
        log("working")
    out = capsys.readouterr().out
    assert "START: stamp" in out
    assert "working" in out
    assert "DONE:  stamp" in out
    assert t.elapsed >= 0.0


def test_stage_timer_logs_failure_and_reraises(capsys):
    set_quiet(False)
    with pytest.raises(RuntimeError):
        with StageTimer("islands"):
            raise RuntimeError("no room")
    assert "FAIL:  islands" in capsys.readouterr().out


def test_quiet_silences_log(capsys):
    set_quiet(True)
    try:
        log("hidden")
    finally:
        set_quiet(False)
    assert capsys.readouterr().out == ""
