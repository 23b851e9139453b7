"""
Tests for the top-level package surface.
"""

import fuzzylang
from fuzzylang.version import get_version, get_version_from_pyproject


class TestPackage:
    def test_version_matches_pyproject(self):
        assert fuzzylang.__version__ == get_version_from_pyproject()
        assert get_version() == fuzzylang.__version__
        assert fuzzylang.__version__ == "0.3.0"

    def test_public_api(self):
        for name in fuzzylang.__all__:
            assert hasattr(fuzzylang, name), name

    def test_end_to_end(self):
        gate = fuzzylang.EvaluationGate()
        hot = fuzzylang.primitive(lambda t: min(1.0, max(0.0, (t - 20) / 10)), element_type=float)
        gate.evaluate(fuzzylang.Assign("hot", hot))

        gate.scopes.enter_scope()
        not_hot = fuzzylang.combine(
            gate.evaluate(fuzzylang.Get("hot")).value, fuzzylang.Operator.COMPLEMENT
        )
        gate.evaluate(fuzzylang.Assign("hot", not_hot))
        assert gate.evaluate(fuzzylang.TestGate(gate.scopes.get("hot"), 25.0)).value == 0.5
        gate.scopes.exit_scope()

        assert gate.evaluate(fuzzylang.TestGate(gate.scopes.get("hot"), 30.0)).value == 1.0
