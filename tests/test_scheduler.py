from tweenkit.program import Program, ProgramState
from tweenkit.group import StepGroup
from tweenkit.scheduler import Scheduler
from tweenkit.value import ValueAnimation


def test_update_advances_each_sequence_once():
    seen = []

    def counter(name, n):
        for i in range(n):
            seen.append((name, i))
            yield i

    scheduler = Scheduler()
    scheduler.add(counter("a", 2))
    scheduler.add(counter("b", 3))

    assert scheduler.update() == 2
    assert seen == [("a", 0), ("b", 0)]
    assert scheduler.update() == 2
    # "a" is exhausted on the next update
    assert scheduler.update() == 1
    assert seen[-1] == ("b", 2)
    assert scheduler.update() == 0
    assert not scheduler.active()


def test_scheduler_drives_value_animation(clock):
    values = []
    anim = ValueAnimation.over(0.0, 10.0, 1.0)

    def follow():
        for v in anim.produce_sequence(clock):
            values.append(v)
            yield v

    scheduler = Scheduler()
    scheduler.add(follow())
    while scheduler.update():
        clock.advance(0.5)
    assert values == [0.0, 5.0, 10.0]
    assert anim.finished


def test_scheduler_drives_program(clock):
    program = Program([StepGroup(0.5)])
    scheduler = Scheduler()
    scheduler.add(program.run(clock))
    while scheduler.update():
        clock.advance(0.25)
    assert program.state is ProgramState.FINISHED
    assert clock.now == 0.75


def test_cancel_closes_sequence():
    closed = []

    def forever():
        try:
            while True:
                yield
        finally:
            closed.append(True)

    scheduler = Scheduler()
    it = scheduler.add(forever())
    scheduler.update()
    assert len(scheduler) == 1
    assert scheduler.cancel(it) is True
    assert closed == [True]
    assert len(scheduler) == 0
    assert scheduler.cancel(it) is False


def _ticker(log, name):
    try:
        while True:
            log.append(name)
            yield
    finally:
        log.append(name + " closed")


def test_cancel_already_advanced_sequence_during_update():
    log = []
    scheduler = Scheduler()
    victim = scheduler.add(_ticker(log, "victim"))

    def killer():
        while True:
            scheduler.cancel(victim)
            yield

    scheduler.add(killer())
    assert scheduler.update() == 1
    assert log == ["victim", "victim closed"]
    assert len(scheduler) == 1
    scheduler.update()
    assert log == ["victim", "victim closed"]


def test_cancel_pending_sequence_during_update():
    log = []
    scheduler = Scheduler()
    holder = []

    def killer():
        scheduler.cancel(holder[0])
        yield

    scheduler.add(killer())
    holder.append(scheduler.add(_ticker(log, "victim")))
    follower = []
    scheduler.add(iter(lambda: follower.append(1) or 0, None))
    assert scheduler.update() == 2
    # never started, so its finally block never ran
    assert log == []
    assert follower == [1]


def test_plain_iterator_cancelled_during_update_stops_advancing():
    scheduler = Scheduler()
    plain = scheduler.add(iter(range(10)))
    scheduler.add(iter(lambda: scheduler.cancel(plain), None))
    scheduler.update()
    scheduler.update()
    assert next(plain) == 1
    assert len(scheduler) == 1


def test_sequence_can_cancel_itself():
    log = []
    scheduler = Scheduler()
    holder = []

    def quitter():
        try:
            while True:
                log.append("tick")
                scheduler.cancel(holder[0])
                yield
        finally:
            log.append("closed")

    holder.append(scheduler.add(quitter()))
    assert scheduler.update() == 0
    assert log == ["tick", "closed"]
    assert not scheduler.active()
