import threading

from dtail.done import Done


def test_initial_state():
    done = Done()
    assert done.is_done() is False
    assert str(done) == "Done(no)"
    assert done.wait(0) is False


def test_shutdown_idempotent():
    done = Done()
    done.shutdown()
    done.shutdown()
    assert done.is_done() is True
    assert str(done) == "Done(yes)"


def test_wait_released_by_other_thread():
    done = Done()
    threading.Timer(0.01, done.shutdown).start()
    assert done.wait(5) is True