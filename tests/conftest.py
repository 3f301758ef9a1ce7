"""
Pytest configuration and fixtures.
"""
import os
import sys

import pytest

# Los módulos de la calculadora viven en la raíz del repositorio
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from calculator_engine import CalculatorEngine  # noqa: E402
from token_classifier import Mode  # noqa: E402


class FakeScheduler:
    """Imita ``after``/``after_cancel`` de tkinter sin bucle de eventos."""

    def __init__(self):
        self.jobs = {}
        self.cancelled = []
        self._next_id = 0

    def after(self, ms, fn=None):
        self._next_id += 1
        job_id = f"after#{self._next_id}"
        self.jobs[job_id] = (ms, fn)
        return job_id

    def after_cancel(self, job_id):
        self.cancelled.append(job_id)
        self.jobs.pop(job_id, None)

    def fire_all(self):
        jobs, self.jobs = self.jobs, {}
        for _ms, fn in jobs.values():
            fn()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def engine(scheduler):
    return CalculatorEngine(scheduler=scheduler)


@pytest.fixture
def sci_engine(scheduler):
    return CalculatorEngine(mode=Mode.SCIENTIFIC, scheduler=scheduler)


def press(engine, sequence: str):
    """Envía al motor los símbolos de ``sequence`` separados por espacios."""
    for symbol in sequence.split():
        engine.submit(symbol)
    return engine
