"""Timing utilities"""

import random
import time

_SYSTEM_RANDOM = random.SystemRandom()


def random_int_between(min_value, max_value, rng=None):
    """
    Uniform integer in [min_value, max_value], both ends included.

    Uses OS entropy when the platform has it, otherwise the module-level
    Mersenne Twister. Pass rng (anything with randint) to pin the source.
    """
    if rng is not None:
        return rng.randint(min_value, max_value)
    try:
        return _SYSTEM_RANDOM.randint(min_value, max_value)
    except NotImplementedError:
        return random.randint(min_value, max_value)


class Scheduler:
    """
    One-shot delayed calls on the single automation thread.

    Every step action goes through random_delay so form interactions land
    at uneven, human-scale intervals. schedule() is also used for the
    results-page reload.
    """

    def __init__(self, min_delay_ms=2000, max_delay_ms=4000, sleep=time.sleep, rng=None):
        self.min_delay_ms = min_delay_ms
        self.max_delay_ms = max_delay_ms
        self._sleep = sleep
        self._rng = rng

    @classmethod
    def from_settings(cls, settings, sleep=time.sleep, rng=None):
        return cls(settings.min_delay_ms, settings.max_delay_ms, sleep=sleep, rng=rng)

    def random_int(self, min_value, max_value):
        return random_int_between(min_value, max_value, rng=self._rng)

    def schedule(self, delay_ms, action):
        """Wait delay_ms once, then run action and hand back its result"""
        self._sleep(delay_ms / 1000)
        return action()

    def random_delay(self, action):
        delay_ms = self.random_int(self.min_delay_ms, self.max_delay_ms)
        print(f"  ⏳ Waiting {delay_ms}ms before next step")
        return self.schedule(delay_ms, action)
