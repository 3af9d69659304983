"""
Tests autosave différé — un job APScheduler par saver, annulation, flush.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unittest.mock import MagicMock

import pytest
from apscheduler.schedulers.background import BackgroundScheduler

from template_builder.editor import Autosaver


@pytest.fixture
def scheduler():
    """Scheduler démarré en pause : les jobs sont enregistrés mais jamais exécutés."""
    s = BackgroundScheduler(timezone="UTC")
    s.start(paused=True)
    yield s
    s.shutdown(wait=False)


def test_schedule_registers_single_job(scheduler):
    saver = Autosaver(MagicMock(), delay=60, scheduler=scheduler)
    saver.schedule()
    saver.schedule()
    saver.schedule()
    assert [j.id for j in scheduler.get_jobs()] == [saver.job_id]
    assert saver.pending


def test_reschedule_pushes_deadline(scheduler):
    saver = Autosaver(MagicMock(), delay=60, scheduler=scheduler)
    saver.schedule()
    first = scheduler.get_job(saver.job_id).trigger.run_date
    saver.schedule()
    assert scheduler.get_job(saver.job_id).trigger.run_date >= first


def test_cancel_removes_job(scheduler):
    save = MagicMock()
    saver = Autosaver(save, delay=60, scheduler=scheduler)
    saver.schedule()
    saver.cancel()
    assert not saver.pending
    save.assert_not_called()


def test_cancel_without_job_is_harmless(scheduler):
    Autosaver(MagicMock(), scheduler=scheduler).cancel()


def test_flush_runs_pending_save(scheduler):
    save = MagicMock()
    saver = Autosaver(save, delay=60, scheduler=scheduler)
    saver.schedule()
    saver.flush()
    save.assert_called_once_with()
    assert not saver.pending


def test_flush_without_pending_does_nothing(scheduler):
    save = MagicMock()
    Autosaver(save, scheduler=scheduler).flush()
    save.assert_not_called()


def test_save_failure_reported(scheduler):
    errors = []
    saver = Autosaver(MagicMock(side_effect=RuntimeError("boom")), delay=60,
                      scheduler=scheduler, on_error=errors.append)
    saver.schedule()
    saver.flush()
    assert len(errors) == 1
    assert str(errors[0]) == "boom"


def test_shutdown_keeps_shared_scheduler_running(scheduler):
    saver = Autosaver(MagicMock(), delay=60, scheduler=scheduler)
    saver.schedule()
    saver.shutdown()
    assert scheduler.running
    assert not saver.pending


def test_own_scheduler_stopped_on_shutdown():
    saver = Autosaver(MagicMock(), delay=60)
    assert saver.scheduler.running
    saver.shutdown()
    assert not saver.scheduler.running


def test_savers_sharing_scheduler_keep_separate_jobs(scheduler):
    save_a, save_b = MagicMock(), MagicMock()
    a = Autosaver(save_a, delay=60, scheduler=scheduler)
    b = Autosaver(save_b, delay=60, scheduler=scheduler)
    a.schedule()
    b.schedule()
    assert a.job_id != b.job_id
    assert {j.id for j in scheduler.get_jobs()} == {a.job_id, b.job_id}

    a.cancel()
    assert not a.pending
    assert b.pending
    b.flush()
    save_b.assert_called_once_with()
    save_a.assert_not_called()
