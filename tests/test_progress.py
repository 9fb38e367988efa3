import threading

from puzzlebox.nasacollage.progress import Progress


def test_inc_counts_without_reporting():
    calls = []
    progress = Progress(1000, lambda cur, mx: calls.append((cur, mx)))
    for _ in range(10):
        progress.inc()
    assert progress.current == 10
    assert calls == []


def test_reports_when_mask_is_reached():
    calls = []
    progress = Progress(99, lambda cur, mx: calls.append((cur, mx)))
    progress.current = 0xFFFFFE
    progress.inc()
    assert calls == [(0xFFFFFF, 99)]
    progress.inc()
    assert len(calls) == 1


def test_inc_is_thread_safe():
    progress = Progress(0, lambda cur, mx: None)

    def work():
        for _ in range(1000):
            progress.inc()

    threads = [threading.Thread(target=work) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert progress.current == 4000