from tests.fakes.fake_clock import FakeClock

__all__ = ["FakeClock"]
