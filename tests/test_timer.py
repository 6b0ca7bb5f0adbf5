import pytest

from throughput.timer import TimerQueue


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def queue(clock):
    return TimerQueue(clock)


def test_empty_queue_has_no_timeout(queue):
    assert queue.timeout() is None
    assert len(queue) == 0


def test_one_shot_fires_once_and_is_removed(queue, clock):
    calls = []
    timer = queue.create(lambda data, now: calls.append((data, now)), "x", 500_000, False)
    queue.run()
    assert calls == []
    clock.now += 0.5
    queue.run()
    assert calls == [("x", clock.now)]
    assert len(queue) == 0
    assert not timer.active
    queue.run()
    assert len(calls) == 1


def test_timeout_counts_down_and_clamps_to_zero(queue, clock):
    queue.create(lambda d, n: None, None, 2_000_000, False)
    assert queue.timeout() == pytest.approx(2.0)
    clock.now += 1.5
    assert queue.timeout() == pytest.approx(0.5)
    clock.now += 10
    assert queue.timeout() == 0.0


def test_explicit_now_overrides_clock(queue):
    timer = queue.create(lambda d, n: None, None, 1_000_000, False, now=5.0)
    assert timer.time == pytest.approx(6.0)
    assert queue.timeout(now=5.25) == pytest.approx(0.75)


def test_periodic_reschedules(queue, clock):
    calls = []
    timer = queue.create(lambda d, n: calls.append(n), None, 1_000_000, True)
    clock.now += 1.0
    queue.run()
    assert len(calls) == 1
    assert timer.active
    assert timer.time == pytest.approx(clock.now + 1.0)
    clock.now += 1.0
    queue.run()
    assert len(calls) == 2


def test_timers_fire_in_expiry_order(queue, clock):
    order = []
    queue.create(lambda d, n: order.append(d), "late", 3_000_000, False)
    queue.create(lambda d, n: order.append(d), "early", 1_000_000, False)
    queue.create(lambda d, n: order.append(d), "middle", 2_000_000, False)
    clock.now += 5
    queue.run()
    assert order == ["early", "middle", "late"]


def test_equal_expiry_keeps_creation_order(queue, clock):
    order = []
    for name in ("a", "b", "c"):
        queue.create(lambda d, n: order.append(d), name, 1000, False)
    clock.now += 1
    queue.run()
    assert order == ["a", "b", "c"]


def test_only_due_timers_fire(queue, clock):
    order = []
    queue.create(lambda d, n: order.append(d), "soon", 1_000_000, False)
    queue.create(lambda d, n: order.append(d), "later", 9_000_000, False)
    clock.now += 2
    queue.run()
    assert order == ["soon"]
    assert len(queue) == 1


def test_cancel_removes_timer(queue, clock):
    calls = []
    timer = queue.create(lambda d, n: calls.append(d), None, 1000, False)
    queue.cancel(timer)
    clock.now += 1
    queue.run()
    assert calls == []
    assert len(queue) == 0
    with pytest.raises(ValueError):
        queue.cancel(timer)


def test_reset_pushes_expiry_forward(queue, clock):
    timer = queue.create(lambda d, n: None, None, 1_000_000, False)
    clock.now += 0.8
    queue.reset(timer)
    assert timer.time == pytest.approx(clock.now + 1.0)
    assert queue.timeout() == pytest.approx(1.0)


def test_proc_may_cancel_itself(queue, clock):
    holder = {}

    def proc(data, now):
        queue.cancel(holder["timer"])

    holder["timer"] = queue.create(proc, None, 1000, True)
    clock.now += 1
    queue.run()
    assert len(queue) == 0


def test_destroy_cancels_everything(queue):
    timers = [queue.create(lambda d, n: None, None, 1000 * i, bool(i % 2)) for i in range(4)]
    queue.destroy()
    assert len(queue) == 0
    assert queue.timeout() is None
    assert all(not t.active for t in timers)


def test_reset_of_cancelled_timer_raises(queue):
    timer = queue.create(lambda d, n: None, None, 1000, False)
    queue.cancel(timer)
    with pytest.raises(ValueError):
        queue.reset(timer)