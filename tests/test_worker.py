import threading

import pytest

from structkit.worker import MessageKind, UserData, WorkerThread, main


def test_posted_data_is_processed_in_order():
    worker = WorkerThread("w", timer_interval=30.0)
    worker.start()
    first = UserData("Hello world", 2017)
    second = UserData("Goodbye world", 2017)
    worker.post(first)
    worker.post(second)
    worker.stop()
    assert worker.processed == [first, second]


def test_post_before_start_raises():
    worker = WorkerThread("idle")
    with pytest.raises(RuntimeError):
        worker.post(UserData("x", 1))


def test_thread_id_before_start_raises():
    with pytest.raises(RuntimeError):
        WorkerThread("idle").thread_id()


def test_thread_id_is_a_different_thread_and_stable():
    worker = WorkerThread("w", timer_interval=30.0)
    assert worker.start() is True
    ident = worker.thread_id()
    assert worker.start() is True
    assert worker.thread_id() == ident
    assert ident != threading.get_ident()
    worker.stop()


def test_stop_without_start_leaves_nothing_processed():
    worker = WorkerThread("w")
    worker.stop()
    assert worker.processed == []


def test_timer_expiry_is_announced_and_ends_worker(capsys):
    worker = WorkerThread("Ticker", timer_interval=0.05)
    worker.start()
    assert worker.timer_expired.wait(5.0)
    worker.stop()
    assert "Timer expired on Ticker" in capsys.readouterr().out


def test_message_kinds_match_protocol():
    kinds = {MessageKind(1), MessageKind(2), MessageKind(3)}
    assert len(kinds) == 3
    with pytest.raises(ValueError):
        MessageKind(4)


def test_main_runs_both_workers(capsys):
    assert main(["--wait", "1.0"]) == 0
    out = capsys.readouterr().out
    assert "Timer expired on WorkerThread1" in out
    assert "Timer expired on WorkerThread2" in out