from src.snake.scheduler import TickScheduler


def test_ticks_once_per_period():
    ticks = []
    sched = TickScheduler(lambda: ticks.append(1), period_ms=150)
    sched.start(1000)
    assert not sched.poll(1149)
    assert sched.poll(1150)
    assert not sched.poll(1200)
    assert sched.poll(1300)
    assert len(ticks) == 2


def test_idle_scheduler_never_ticks():
    ticks = []
    sched = TickScheduler(lambda: ticks.append(1))
    assert not sched.active
    assert not sched.poll(10_000)
    assert ticks == []


def test_restart_replaces_existing_timer():
    ticks = []
    sched = TickScheduler(lambda: ticks.append(1), period_ms=150)
    sched.start(0)
    sched.start(100)
    assert not sched.poll(150)
    assert sched.poll(250)
    assert len(ticks) == 1


def test_cancel_drops_pending_tick():
    ticks = []
    sched = TickScheduler(lambda: ticks.append(1), period_ms=150)
    sched.start(0)
    sched.cancel()
    assert not sched.active
    assert not sched.poll(1_000)
    assert ticks == []


def test_tick_that_cancels_is_not_rearmed():
    sched = None

    def on_tick():
        sched.cancel()

    sched = TickScheduler(on_tick, period_ms=150)
    sched.start(0)
    assert sched.poll(150)
    assert not sched.active
    assert not sched.poll(300)


def test_stall_drops_missed_ticks():
    ticks = []
    sched = TickScheduler(lambda: ticks.append(1), period_ms=150)
    sched.start(0)
    assert sched.poll(1_000)
    assert not sched.poll(1_001)
    assert not sched.poll(1_149)
    assert sched.poll(1_150)
    assert len(ticks) == 2
