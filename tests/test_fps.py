from cubecaster.fps import FpsCounter


def _clock(times):
    it = iter(times)
    return lambda: next(it)


def test_no_report_before_a_second():
    counter = FpsCounter(_clock([0.5, 0.9]))
    assert counter.tick() is None
    assert counter.tick() is None


def test_reports_frame_count_after_a_second():
    counter = FpsCounter(_clock([0.5, 0.9, 1.0]))
    results = [counter.tick() for _ in range(3)]
    assert results == [None, None, 3]
    assert counter.fps == 3


def test_counter_resets_after_report():
    counter = FpsCounter(_clock([1.0, 1.5, 2.0]))
    assert counter.tick() == 1
    assert counter.tick() is None
    assert counter.tick() == 2


def test_report_prints_rate(capsys):
    counter = FpsCounter(_clock([1.0]))
    assert counter.report() == 1
    assert capsys.readouterr().out == "FPS: 1\n"


def test_report_silent_without_rate(capsys):
    counter = FpsCounter(_clock([0.2]))
    assert counter.report() is None
    assert capsys.readouterr().out == ""