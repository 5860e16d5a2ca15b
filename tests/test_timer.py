from raplab.timer import SimpleTimer


def test_start_returns_the_timer():
    t = SimpleTimer()
    assert t.start() is t


def test_duration_grows_and_restart_resets():
    t = SimpleTimer().start()
    first = t.duration_seconds()
    assert first >= 0
    while t.duration_seconds() <= 0.02:
        sum(range(1000))
    assert t.duration_seconds() > first
    t.start()
    assert t.duration_seconds() < 0.02


def test_print_duration_format(capsys):
    t = SimpleTimer().start()
    t.print_duration()
    out = capsys.readouterr().out
    prefix = " System Clock Duration: "
    assert out.startswith(prefix)
    assert float(out[len(prefix):].strip()) >= 0