"""
Unit tests for minimization and decrease conditions and get_condition.

Covers the residual closed forms of each variant, the NoCheck marker,
construction-time validation, and the NotImplementedError contract for
condition subclasses without get_condition.
"""

import pickle

import pytest
import numpy as np
from numpy import array

from neural_lyapunov.conditions import (
    AsymptoticDecrease,
    DecreaseCondition,
    DontCheckDecrease,
    DontCheckNonnegativity,
    ExponentialDecrease,
    LyapunovDecreaseCondition,
    LyapunovMinimizationCondition,
    MinimizationCondition,
    NoCheck,
    PositiveSemiDefinite,
    StrictlyPositiveDefinite,
    get_condition,
)
from neural_lyapunov.conditions.util import DEFAULT_C, squared_distance
from neural_lyapunov.structures import UnstructuredNeuralLyapunov


def V(x):
    return 3 * x[0] ** 2 + x[1] ** 2 - 0.5


def dVdt(x):
    return -x[0] ** 2 + 0.1 * x[1]


@pytest.fixture
def x0():
    return array([0.5, -0.5])


@pytest.fixture
def states(x0):
    return [x0, array([1.0, 2.0]), array([-3.0, 0.25]), array([0.0, 0.0])]


class TestNoCheck:
    def test_is_singleton(self):
        assert type(NoCheck)() is NoCheck
        assert pickle.loads(pickle.dumps(NoCheck)) is NoCheck

    def test_is_not_none(self):
        assert NoCheck is not None
        assert not NoCheck
        assert repr(NoCheck) == 'NoCheck'


class TestMinimizationConditions:
    def test_strictly_positive_definite(self, states, x0):
        C = 0.3
        residual = get_condition(StrictlyPositiveDefinite(C))
        for x in states:
            assert residual(V, x, x0) == pytest.approx(V(x) - C * np.dot(x - x0, x - x0))

    def test_strictly_positive_definite_defaults(self):
        cond = StrictlyPositiveDefinite()

        assert cond.C == DEFAULT_C == 1e-6
        assert cond.check_nonnegativity
        assert cond.check_fixed_point

    def test_positive_semi_definite(self, states, x0):
        residual = get_condition(PositiveSemiDefinite())
        for x in states:
            assert residual(V, x, x0) == V(x)
        assert PositiveSemiDefinite().check_fixed_point
        assert not PositiveSemiDefinite(False).check_fixed_point

    def test_boundary_at_fixed_point_is_satisfied(self, x0):
        shifted_V = lambda x: squared_distance(x, x0)

        assert get_condition(PositiveSemiDefinite())(shifted_V, x0, x0) == 0.0
        assert get_condition(StrictlyPositiveDefinite(1.0))(shifted_V, x0, x0) == 0.0

    @pytest.mark.parametrize('check_fixed_point', [True, False])
    def test_dont_check_nonnegativity(self, check_fixed_point):
        cond = DontCheckNonnegativity(check_fixed_point)

        assert get_condition(cond) is NoCheck
        assert cond.strength is None
        assert cond.check_fixed_point is check_fixed_point
        assert not DontCheckNonnegativity().check_fixed_point

    def test_general_condition(self, states, x0):
        cond = LyapunovMinimizationCondition(True, lambda x, x0: np.sum(np.abs(x - x0)), False)
        residual = get_condition(cond)
        for x in states:
            assert residual(V, x, x0) == pytest.approx(V(x) - np.sum(np.abs(x - x0)))

    def test_strength_required(self):
        with pytest.raises(ValueError, match='strength is required'):
            LyapunovMinimizationCondition(True, None, True)

    def test_strength_forbidden(self):
        with pytest.raises(ValueError, match='strength must be None'):
            LyapunovMinimizationCondition(False, lambda x, x0: 0.0, True)

    def test_strength_callable(self):
        with pytest.raises(TypeError, match='strength must be callable'):
            LyapunovMinimizationCondition(True, 0.0, True)

    def test_negative_coefficient(self):
        with pytest.raises(ValueError, match='C must be nonnegative'):
            StrictlyPositiveDefinite(-1.0)

    def test_is_read_only(self):
        cond = StrictlyPositiveDefinite()
        with pytest.raises(AttributeError):
            cond.check_fixed_point = False
        with pytest.raises(AttributeError):
            cond.strength = None


class TestDecreaseConditions:
    def test_asymptotic(self, states, x0):
        residual = get_condition(AsymptoticDecrease())
        for x in states:
            assert residual(V, dVdt, x, x0) == dVdt(x)

    def test_asymptotic_strict(self, states, x0):
        C = 0.2
        residual = get_condition(AsymptoticDecrease(strict=True, C=C))
        for x in states:
            assert residual(V, dVdt, x, x0) == pytest.approx(dVdt(x) + C * np.dot(x - x0, x - x0))

    def test_asymptotic_defaults(self):
        cond = AsymptoticDecrease()

        assert cond.check_decrease
        assert not cond.strict
        assert not cond.check_fixed_point
        assert cond.C == DEFAULT_C

    def test_exponential(self, states, x0):
        k = 1.5
        residual = get_condition(ExponentialDecrease(k))
        for x in states:
            assert residual(V, dVdt, x, x0) == pytest.approx(dVdt(x) + k * V(x))

    def test_exponential_strict(self, states, x0):
        k, C = 0.5, 0.01
        cond = ExponentialDecrease(k, strict=True, check_fixed_point=True, C=C)
        residual = get_condition(cond)

        assert cond.k == k
        assert cond.strict
        assert cond.check_fixed_point
        for x in states:
            assert residual(V, dVdt, x, x0) == pytest.approx(dVdt(x) + k * V(x) + C * np.dot(x - x0, x - x0))

    @pytest.mark.parametrize('check_fixed_point', [True, False])
    def test_dont_check_decrease(self, check_fixed_point):
        cond = DontCheckDecrease(check_fixed_point)

        assert get_condition(cond) is NoCheck
        assert cond.decrease is None
        assert cond.strength is None
        assert cond.check_fixed_point is check_fixed_point

    def test_decrease_and_strength_required(self):
        with pytest.raises(ValueError, match='required'):
            LyapunovDecreaseCondition(True, lambda V, dVdt: dVdt, None, False)
        with pytest.raises(ValueError, match='required'):
            LyapunovDecreaseCondition(True, None, lambda x, x0: 0.0, False)

    def test_decrease_and_strength_forbidden(self):
        with pytest.raises(ValueError, match='must be None'):
            LyapunovDecreaseCondition(False, lambda V, dVdt: dVdt, None, False)

    def test_decrease_callable(self):
        with pytest.raises(TypeError, match='decrease must be callable'):
            LyapunovDecreaseCondition(True, 'dVdt', lambda x, x0: 0.0, False)

    def test_negative_coefficient(self):
        with pytest.raises(ValueError):
            AsymptoticDecrease(True, C=-1e-3)
        with pytest.raises(ValueError):
            ExponentialDecrease(1.0, True, C=-1e-3)


class TestScalarLinearSystem:
    """phi(x) = x, f(x) = -x, x0 = 0 with the unstructured Lyapunov function."""

    structure = UnstructuredNeuralLyapunov()
    xs = [-2.0, -0.5, 0.0, 0.5, 2.0]

    @staticmethod
    def phi(x):
        return x

    @staticmethod
    def J_phi(x):
        return 1.0

    @staticmethod
    def f(x):
        return -x

    def V(self, x):
        return self.structure.V(self.phi, x, 0.0)

    def dVdt(self, x):
        return self.structure.V_dot(self.phi, self.J_phi, self.f, x, 0.0)

    def test_asymptotic_decrease_flags_sign(self):
        residual = get_condition(AsymptoticDecrease(strict=False))
        for x in self.xs:
            value = residual(self.V, self.dVdt, x, 0.0)
            assert value == -x
            assert (value <= 0) == (x >= 0)

    def test_exponential_decrease_on_boundary(self):
        residual = get_condition(ExponentialDecrease(1.0))
        for x in self.xs:
            assert residual(self.V, self.dVdt, x, 0.0) == 0.0


class TestDispatcher:
    def test_unimplemented_minimization_condition(self):
        class CustomMinimization(MinimizationCondition):
            pass

        with pytest.raises(NotImplementedError, match='CustomMinimization'):
            get_condition(CustomMinimization(True))

    def test_unimplemented_decrease_condition(self):
        class CustomDecrease(DecreaseCondition):
            pass

        with pytest.raises(NotImplementedError, match='CustomDecrease'):
            get_condition(CustomDecrease(False))

    def test_custom_condition(self, x0):
        class LowerBound(MinimizationCondition):
            def get_condition(self):
                return lambda V, x, x0: V(x) + 1.0

        residual = get_condition(LowerBound(True))

        assert residual(V, x0, x0) == V(x0) + 1.0

    def test_rejects_non_conditions(self):
        with pytest.raises(TypeError):
            get_condition(lambda V, x, x0: V(x))
        with pytest.raises(TypeError):
            get_condition(None)

    def test_residuals_are_independent(self, x0):
        first = get_condition(StrictlyPositiveDefinite(1.0))
        second = get_condition(StrictlyPositiveDefinite(2.0))
        x = array([1.5, 0.5])

        assert first(V, x, x0) - second(V, x, x0) == pytest.approx(np.dot(x - x0, x - x0))


CONDITIONS = [
    StrictlyPositiveDefinite(0.3),
    PositiveSemiDefinite(),
    DontCheckNonnegativity(True),
    LyapunovMinimizationCondition(True, squared_distance, False),
    AsymptoticDecrease(),
    AsymptoticDecrease(strict=True, C=0.2),
    ExponentialDecrease(1.5),
    ExponentialDecrease(0.5, strict=True, check_fixed_point=True, C=0.01),
    DontCheckDecrease(True),
]


def evaluate_residual(cond, residual, x, x0):
    if isinstance(cond, DecreaseCondition):
        return residual(V, dVdt, x, x0)
    return residual(V, x, x0)


class TestPickling:
    """Conditions and residuals are sent to worker processes by pickling."""

    @pytest.mark.parametrize('cond', CONDITIONS, ids=lambda cond: type(cond).__name__)
    def test_condition_round_trip(self, cond, states, x0):
        restored = pickle.loads(pickle.dumps(cond))
        residual = get_condition(cond)
        restored_residual = get_condition(restored)

        assert type(restored) is type(cond)
        assert restored.check_fixed_point == cond.check_fixed_point
        if residual is NoCheck:
            assert restored_residual is NoCheck
            return
        for x in states:
            assert evaluate_residual(cond, restored_residual, x, x0) == evaluate_residual(cond, residual, x, x0)

    @pytest.mark.parametrize('cond', CONDITIONS, ids=lambda cond: type(cond).__name__)
    def test_residual_round_trip(self, cond, states, x0):
        residual = get_condition(cond)
        restored = pickle.loads(pickle.dumps(residual))

        if residual is NoCheck:
            assert restored is NoCheck
            return
        for x in states:
            assert evaluate_residual(cond, restored, x, x0) == evaluate_residual(cond, residual, x, x0)

    def test_exponential_decrease_keeps_rate(self):
        restored = pickle.loads(pickle.dumps(ExponentialDecrease(2.5, strict=True, C=0.1)))

        assert restored.k == 2.5
        assert restored.strict
        assert restored.C == 0.1


class TestNonFiniteCoefficients:
    def test_nan_coefficient(self):
        with pytest.raises(ValueError, match='C must be nonnegative'):
            StrictlyPositiveDefinite(float('nan'))
        with pytest.raises(ValueError):
            AsymptoticDecrease(True, C=float('nan'))
        with pytest.raises(ValueError):
            ExponentialDecrease(1.0, C=float('nan'))
