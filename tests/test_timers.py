import pytest

from structkit.timers import (
    CallbackResult,
    DeadlineTooFarError,
    TimerList,
    TimerPoolExhaustedError,
    TimerType,
    TimingWheel,
)


def test_wheel_fires_after_deadline_slots():
    calls = []
    wheel = TimingWheel(granularity=1, bins=10)
    wheel.install(4, lambda: calls.append("x"))
    results = [wheel.tick() for _ in range(5)]
    assert results[:4] == [[], [], [], []]
    assert results[4] == [4]
    assert calls == ["x"]


def test_wheel_same_slot_keeps_install_order():
    calls = []
    wheel = TimingWheel(granularity=10, bins=10)
    wheel.install(0, lambda: calls.append("a"))
    wheel.install(5, lambda: calls.append("b"))
    assert wheel.tick() == [0, 5]
    assert calls == ["a", "b"]


def test_wheel_rejects_far_deadline():
    wheel = TimingWheel(granularity=10, bins=10)
    with pytest.raises(DeadlineTooFarError):
        wheel.install(100, lambda: None)


def test_wheel_install_is_relative_to_current_slot():
    wheel = TimingWheel(granularity=1, bins=10)
    for _ in range(3):
        wheel.tick()
    wheel.install(0, lambda: None)
    assert wheel.tick() == [0]


def test_wheel_slot_wraps_around():
    wheel = TimingWheel(granularity=1, bins=3)
    for _ in range(3):
        wheel.tick()
    assert wheel.cur_slot == 0


def test_pool_exhaustion():
    timers = TimerList(num_timers=2)
    timers.allocate()
    timers.allocate()
    with pytest.raises(TimerPoolExhaustedError):
        timers.allocate()


def test_relative_timer_counts_from_current_tick():
    timers = TimerList()
    timers.tick()
    timers.tick()
    timer = timers.allocate()
    timers.set_timer(timer, TimerType.RELATIVE, 5, lambda data: None, None)
    assert timer.fire == timers.tick_count + 5


def test_absolute_timer_keeps_fire_time():
    timers = TimerList()
    timers.tick()
    timer = timers.allocate()
    timers.set_timer(timer, TimerType.ABSOLUTE, 7, lambda data: None, None)
    assert timer.fire == 7


def test_invalid_timer_type():
    timers = TimerList()
    timer = timers.allocate()
    with pytest.raises(ValueError):
        timers.set_timer(timer, TimerType.INVALID, 1, lambda data: None, None)


def test_arm_keeps_active_sorted():
    timers = TimerList()
    for fire in (30, 10, 20):
        timer = timers.allocate()
        timers.set_timer(timer, TimerType.ABSOLUTE, fire, lambda data: None, None)
        timers.arm(timer)
    fires = [t.fire for t in timers.active()]
    assert fires == sorted(fires)


def test_tick_fires_due_timers_with_user_data():
    seen = []
    timers = TimerList()
    timer = timers.allocate()
    timers.set_timer(timer, TimerType.ABSOLUTE, 2, seen.append, "payload")
    timers.arm(timer)
    assert timers.tick() == []
    assert timers.tick() == [timer]
    assert seen == ["payload"]
    assert timers.active() == []


def test_free_timer_result_returns_timer_to_pool():
    timers = TimerList(num_timers=1)
    timer = timers.allocate()
    timers.set_timer(timer, TimerType.RELATIVE, 1,
                     lambda data: CallbackResult.FREE_TIMER, None)
    timers.arm(timer)
    timers.tick()
    assert timers.allocate() is timer


def test_normal_result_keeps_timer_out_of_pool():
    timers = TimerList(num_timers=1)
    timer = timers.allocate()
    timers.set_timer(timer, TimerType.RELATIVE, 1,
                     lambda data: CallbackResult.NORMAL, None)
    timers.arm(timer)
    timers.tick()
    with pytest.raises(TimerPoolExhaustedError):
        timers.allocate()


def test_disarm_removes_timer():
    timers = TimerList()
    timer = timers.allocate()
    timers.set_timer(timer, TimerType.ABSOLUTE, 1, lambda data: None, None)
    timers.arm(timer)
    timers.disarm(timer)
    assert timers.active() == []
    assert timers.tick() == []
    with pytest.raises(ValueError):
        timers.disarm(timer)