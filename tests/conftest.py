"""
Shared fixtures for the fuzzylang test suite.
"""

import pytest

from fuzzylang.fuzzy.membership import TriangularMF
from fuzzylang.fuzzy.sets import primitive
from fuzzylang.runtime.gate import EvaluationGate
from fuzzylang.runtime.scope import ScopeStack


@pytest.fixture
def above_half():
    """Crisp set: 1.0 for x > 0.5, 0.0 otherwise."""
    return primitive(lambda x: 1.0 if x > 0.5 else 0.0, name="above_half")


@pytest.fixture
def below_half():
    """Crisp set: 1.0 for x < 0.5, 0.0 otherwise."""
    return primitive(lambda x: 1.0 if x < 0.5 else 0.0, name="below_half")


@pytest.fixture
def rising():
    """Graded set whose degree equals the element, clipped to [0, 1]."""
    return primitive(lambda x: min(1.0, max(0.0, x)), element_type=float, name="rising")


@pytest.fixture
def peaked():
    """Triangular set over [0, 0.5, 1]."""
    return primitive(TriangularMF([0.0, 0.5, 1.0]), element_type=float, name="peaked")


@pytest.fixture
def sample_points():
    """Elements spanning the unit interval and a little beyond it."""
    return [-0.5, 0.0, 0.1, 0.25, 0.3, 0.5, 0.6, 0.75, 0.9, 1.0, 1.5]


@pytest.fixture
def scopes():
    return ScopeStack()


@pytest.fixture
def gate(scopes):
    return EvaluationGate(scopes)
