import math
from dataclasses import FrozenInstanceError

import pytest

from kinetic.combinators import current_time, forever, wiggle
from kinetic.kernel import Behavior, Option, create, lift, none, select, some
from kinetic.kernel.behavior import _extensions_registry
from fakes import make_counter

TIMES = [-3.5, -1.0, 0.0, 0.25, 1.0, 2.75, 10.0]


def test_create_wraps_function() -> None:
    squared = create(lambda t: t * t)
    assert squared.sample(3.0) == 9.0
    assert squared.sample(-2.0) == 4.0


def test_behavior_is_immutable() -> None:
    b = forever(1)
    with pytest.raises(FrozenInstanceError):
        b._sample = lambda t: 2  # type: ignore[misc]


@pytest.mark.parametrize("value", [0, 2.5, "text", (1, 2), None])
def test_forever_is_constant(value: object) -> None:
    b = forever(value)
    assert all(b.sample(t) == value for t in TIMES)


def test_current_time_returns_time() -> None:
    assert all(current_time.sample(t) == t for t in TIMES)


class TestWiggle:
    def test_known_points(self) -> None:
        assert wiggle.sample(0.0) == 0.0
        assert math.isclose(wiggle.sample(0.5), 1.0)
        assert math.isclose(wiggle.sample(1.5), -1.0)

    @pytest.mark.parametrize("t", [x / 10 for x in range(-40, 41)])
    def test_bounded(self, t: float) -> None:
        assert -1.0 <= wiggle.sample(t) <= 1.0

    @pytest.mark.parametrize("t", TIMES)
    def test_period_two(self, t: float) -> None:
        assert math.isclose(wiggle.sample(t), wiggle.sample(t + 2.0), abs_tol=1e-9)


class TestLift:
    def test_lift_synchronises_arguments(self) -> None:
        total = lift(lambda x, y: x + y)(forever(2.0), current_time)
        assert total.sample(5.0) == 7.0

    def test_lift_one_argument(self) -> None:
        doubled = lift(lambda x: x * 2)(current_time)
        assert doubled.sample(4.0) == 8.0

    def test_lift_three_arguments(self) -> None:
        triple = lift(lambda a, b, c: (a, b, c))(current_time, forever("k"), current_time.faster(2.0))
        assert triple.sample(1.5) == (1.5, "k", 3.0)

    def test_lift_samples_every_argument_at_same_time(self) -> None:
        seen: list[float] = []

        def spy(t: float) -> float:
            seen.append(t)
            return t

        spied = create(spy)
        lift(lambda a, b: a - b)(spied, spied).sample(6.0)
        assert seen == [6.0, 6.0]

    def test_lift_does_not_cache(self) -> None:
        func, calls = make_counter()
        b = lift(func)(current_time)
        b.sample(1.0)
        b.sample(1.0)
        assert calls() == 2

    def test_lift_rejects_too_few_behaviors(self) -> None:
        with pytest.raises(TypeError):
            lift(lambda x, y: x + y)(current_time)

    def test_lift_rejects_too_many_behaviors(self) -> None:
        with pytest.raises(TypeError):
            lift(lambda x: x)(current_time, current_time)

    def test_lift_accepts_variadic_function(self) -> None:
        total = lift(lambda *xs: sum(xs))(current_time, current_time, forever(1.0))
        assert total.sample(2.0) == 5.0

    def test_map_equals_lift(self) -> None:
        f = lambda x: x * 3 + 1  # noqa: E731
        mapped = current_time.map(f)
        lifted = lift(f)(current_time)
        assert all(mapped.sample(t) == lifted.sample(t) for t in TIMES)

    def test_select_is_map(self) -> None:
        assert select(current_time, str).sample(2.0) == "2.0"

    @pytest.mark.parametrize("t", TIMES)
    def test_associativity(self, t: float) -> None:
        combine = lift(lambda x, y: x + y)
        a, b, c = current_time, forever(3), current_time.map(lambda v: v * v)
        left = combine(combine(a, b), c)
        right = combine(a, combine(b, c))
        assert math.isclose(left.sample(t), right.sample(t))

    @pytest.mark.parametrize("t", TIMES)
    def test_string_concatenation_associativity(self, t: float) -> None:
        combine = lift(lambda x, y: x + y)
        a = current_time.map(str)
        b = forever("|")
        c = current_time.map(lambda v: str(-v))
        assert combine(combine(a, b), c).sample(t) == combine(a, combine(b, c)).sample(t)


class TestPurity:
    def test_repeated_sampling_is_stable(self) -> None:
        b = lift(lambda x, y: x * y)(wiggle, current_time).faster(3.0).wait(0.2)
        first = b.sample(1.234)
        assert all(b.sample(1.234) == first for _ in range(1000))

    def test_out_of_order_sampling(self) -> None:
        b = wiggle.map(lambda v: v * 10)
        forward = [b.sample(t) for t in TIMES]
        backward = [b.sample(t) for t in reversed(TIMES)]
        assert forward == list(reversed(backward))

    def test_shared_sub_behavior(self) -> None:
        base = current_time.map(lambda v: v + 1)
        left = base.map(lambda v: v * 2)
        right = base.map(lambda v: -v)
        assert left.sample(1.0) == 4.0
        assert right.sample(1.0) == -2.0
        assert base.sample(1.0) == 2.0


class TestFailures:
    def test_exception_propagates_from_sample(self) -> None:
        broken = current_time.map(lambda t: 1 / t)
        with pytest.raises(ZeroDivisionError):
            broken.sample(0.0)
        assert broken.sample(2.0) == 0.5

    def test_exception_propagates_through_lift(self) -> None:
        def boom(_: float) -> float:
            raise RuntimeError("boom")

        nested = lift(lambda x, y: x + y)(current_time, create(boom)).faster(2.0)
        with pytest.raises(RuntimeError, match="boom"):
            nested.sample(1.0)

    def test_option_behavior_models_partial_values(self) -> None:
        def safe_reciprocal(t: float) -> Option[float]:
            return none() if t == 0 else some(1 / t)

        partial = current_time.map(safe_reciprocal)
        shifted = partial.map(lambda opt: opt.map(lambda v: v + 1))
        assert shifted.sample(0.0) == none()
        assert shifted.sample(2.0) == some(1.5)


class TestExtensions:
    @pytest.fixture
    def negated_op(self):
        Behavior.register_op("negated", lambda b: b.map(lambda v: -v))
        yield
        _extensions_registry.pop("negated", None)

    def test_unknown_attribute_raises(self) -> None:
        with pytest.raises(AttributeError):
            current_time.no_such_operation  # noqa: B018

    def test_register_op(self, negated_op) -> None:
        assert current_time.negated().sample(4.0) == -4.0

    def test_unregistered_op_is_gone(self) -> None:
        assert "negated" not in _extensions_registry
        with pytest.raises(AttributeError):
            current_time.negated  # noqa: B018
