"""
Pytest configuration and fixtures.
"""
import pytest
import sys
import os

# Add the parent directory to path so the flat modules import
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from calculator_engine import CalculatorEngine
from input_dispatcher import KeyDispatcher


@pytest.fixture
def engine():
    """Fresh engine in its initial state."""
    return CalculatorEngine()


@pytest.fixture
def press(engine):
    """Feed a key sequence like "5 + 3 =" through the dispatcher."""
    dispatcher = KeyDispatcher(engine)

    def _press(sequence: str):
        for token in sequence.split():
            if token in ("Enter", "Escape", "Backspace"):
                dispatcher.handle_key(token)
            else:
                for key in token:
                    dispatcher.handle_key(key)
        return engine

    return _press
