import time

from dining.timing import now_ms, precise_sleep


def test_now_ms_matches_wall_clock():
    assert abs(now_ms() - time.time() * 1000) < 50


def test_now_ms_does_not_go_backwards():
    first = now_ms()
    second = now_ms()
    assert second >= first


def test_precise_sleep_waits_at_least_requested():
    start = now_ms()
    precise_sleep(30)
    elapsed = now_ms() - start
    assert 29 <= elapsed < 30 + 500


def test_precise_sleep_zero_returns_quickly():
    start = now_ms()
    precise_sleep(0)
    assert now_ms() - start < 50