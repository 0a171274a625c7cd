import threading

from dining.sync import LockedValue


def test_default_is_zero():
    assert LockedValue().get() == 0


def test_set_then_get():
    value = LockedValue()
    value.set(True)
    assert value.get() is True


def test_increment_single_thread():
    value = LockedValue(5)
    value.increment()
    value.increment()
    assert value.get() == 5 + 2


def test_increment_is_thread_safe():
    value = LockedValue()
    workers, per_worker = 8, 1000

    def work():
        for _ in range(per_worker):
            value.increment()

    threads = [threading.Thread(target=work) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert value.get() == workers * per_worker