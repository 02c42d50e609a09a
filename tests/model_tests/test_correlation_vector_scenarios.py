# tests/model_tests/test_correlation_vector_scenarios.py
# This file is part of Corvec - Correlation Vector tracing
#
# Creation, extend, increment and formatting of correlation vectors

"""Test suite for the CorrelationVector engine.

Covers:
- Fresh and seeded creation, base encoding
- extend / increment and their length accounting
- The one-way cutover to the immutable state at the length budget
- Formatting and copying
"""

import copy
import uuid

import pytest

from model import CorrelationVector, FixedRandomSource, VectorState, encode_base
from model.constants import MAX_VECTOR_LENGTH, MAX_WIRE_LENGTH, TERMINATOR


def wire_length(cv: CorrelationVector) -> int:
    return len(str(cv).encode("utf-8"))


class TestCreation:
    """Fresh vectors and base identity encoding."""

    def test_fresh_vector_has_two_segments(self):
        cv = CorrelationVector.create()
        assert len(str(cv).split(".")) == 2
        assert cv.vector == [0]
        assert cv.state is VectorState.MUTABLE
        assert not cv.immutable

    def test_fresh_vector_length_accounting(self):
        cv = CorrelationVector.create()
        assert cv.serialized_length == len(cv.base) + 2
        assert cv.serialized_length == wire_length(cv)

    def test_base_is_unpadded_base64(self):
        cv = CorrelationVector.create()
        assert len(cv.base) == 22
        assert "=" not in cv.base

    def test_fresh_vectors_differ(self):
        assert CorrelationVector.create().base != CorrelationVector.create().base

    def test_seeded_base_is_deterministic(self, fixed_seed):
        seed, expected = fixed_seed
        cv = CorrelationVector.create_from_seed(seed)
        assert cv.base == expected
        assert str(cv) == f"{expected}.0"

    def test_seed_forms_are_equivalent(self, fixed_seed):
        seed, expected = fixed_seed
        assert encode_base(seed) == expected
        assert encode_base(seed.bytes) == expected
        assert encode_base(seed.int) == expected

    def test_zero_seed(self):
        assert encode_base(0) == "AAAAAAAAAAAAAAAAAAAAAA"

    @pytest.mark.parametrize("bad_seed", [b"short", bytes(17), -1, 2**128])
    def test_malformed_seed_rejected(self, bad_seed):
        with pytest.raises(ValueError):
            CorrelationVector.create_from_seed(bad_seed)

    def test_create_uses_injected_source(self, fixed_seed):
        seed, expected = fixed_seed
        cv = CorrelationVector.create(random_source=FixedRandomSource(seed=seed.bytes))
        assert cv.base == expected

    def test_empty_vector_rejected(self):
        with pytest.raises(ValueError):
            CorrelationVector(base="base", vector=[])

    def test_direct_construction_computes_length(self):
        cv = CorrelationVector(base="base", vector=[1, 22], state=VectorState.IMMUTABLE)
        assert str(cv) == "base.1.22!"
        assert cv.serialized_length == 10


class TestExtend:
    """Appending counters."""

    def test_extend_adds_segment(self):
        cv = CorrelationVector.create()
        cv.extend()
        assert len(str(cv).split(".")) == 3
        assert cv.vector == [0, 0]
        assert cv.serialized_length == wire_length(cv)

    def test_repeated_extend_terminates(self):
        cv = CorrelationVector.create()
        for _ in range(128):
            cv.extend()

        cv_string = str(cv)
        assert cv.immutable
        assert cv_string.endswith(TERMINATOR)
        assert len(cv_string) <= MAX_WIRE_LENGTH
        assert cv.serialized_length == len(cv_string)

    def test_extend_budget_boundary(self):
        # 22-char base + ".0" = 24; 51 extends reach 126, the 52nd would be 128
        cv = CorrelationVector.create()
        for _ in range(51):
            cv.extend()
        assert not cv.immutable
        assert cv.serialized_length == 126

        cv.extend()
        assert cv.immutable
        assert len(cv.vector) == 52
        assert cv.serialized_length == 127
        assert cv.serialized_length == wire_length(cv)

    def test_extend_is_noop_once_immutable(self):
        cv = CorrelationVector.create()
        for _ in range(60):
            cv.extend()
        snapshot = cv.copy()

        cv.extend()
        cv.extend()
        assert cv == snapshot


class TestIncrement:
    """Incrementing the last counter and digit growth."""

    def test_increment_fresh_vector_ends_in_one(self):
        cv = CorrelationVector.create()
        cv.increment()
        assert str(cv).endswith("1")
        assert cv.vector == [1]

    def test_increment_only_touches_last_counter(self):
        cv = CorrelationVector(base="b", vector=[5, 7])
        cv.increment()
        assert cv.vector == [5, 8]

    @pytest.mark.parametrize(
        "start, growth",
        [(0, 0), (8, 0), (9, 1), (19, 0), (99, 1), (999999, 1), (123456789, 0)],
    )
    def test_increment_length_growth(self, start, growth):
        cv = CorrelationVector(base="base", vector=[start])
        before = cv.serialized_length

        cv.increment()

        assert cv.vector == [start + 1]
        assert cv.serialized_length == before + growth
        assert cv.serialized_length == wire_length(cv)

    def test_increment_through_many_carries(self):
        cv = CorrelationVector.create()
        for _ in range(1000):
            cv.increment()
            assert cv.serialized_length == wire_length(cv)
        assert cv.vector == [1000]

    def test_increment_that_adds_digit_at_budget_terminates(self, long_unterminated):
        text = long_unterminated[: -len("12344459")] + "99999999"
        cv = CorrelationVector.parse(text)
        assert cv.serialized_length == MAX_VECTOR_LENGTH

        cv.increment()

        cv_string = str(cv)
        assert cv.immutable
        assert cv.vector[-1] == 99999999
        assert len(cv_string) == MAX_WIRE_LENGTH
        assert cv_string.endswith(TERMINATOR)

    def test_increment_without_digit_growth_at_budget(self, long_unterminated):
        cv = CorrelationVector.parse(long_unterminated)
        cv.increment()
        assert not cv.immutable
        assert cv.vector[-1] == 12344460
        assert cv.serialized_length == MAX_VECTOR_LENGTH

    def test_increment_on_terminated_vector_stays_at_ceiling(self, long_unterminated):
        cv = CorrelationVector.parse(long_unterminated + TERMINATOR)
        cv.increment()
        cv_string = str(cv)
        assert len(cv_string) == MAX_WIRE_LENGTH
        assert cv_string.endswith(TERMINATOR)
        assert cv.vector[-1] == 12344459

    def test_increment_past_u32_terminates(self):
        cv = CorrelationVector(base="base", vector=[2**32 - 1])
        cv.increment()
        assert cv.immutable
        assert cv.vector == [2**32 - 1]
        assert cv.serialized_length == wire_length(cv)


class TestFormattingAndCopy:
    """String form, equality and forking."""

    def test_terminator_iff_immutable(self):
        cv = CorrelationVector(base="base", vector=[0])
        assert not str(cv).endswith(TERMINATOR)
        cv.state = VectorState.IMMUTABLE
        assert str(cv).endswith(TERMINATOR)

    def test_format_matches_str(self):
        cv = CorrelationVector(base="abc", vector=[1, 2, 3])
        assert cv.format() == str(cv) == "abc.1.2.3"
        assert repr(cv) == "CorrelationVector('abc.1.2.3')"

    def test_copy_is_independent(self):
        cv = CorrelationVector.create()
        fork = cv.copy()
        fork.extend()
        fork.increment()

        assert cv.vector == [0]
        assert fork.vector == [0, 1]
        assert cv.base == fork.base

    def test_copy_module_support(self):
        cv = CorrelationVector.create()
        fork = copy.copy(cv)
        assert fork == cv
        assert fork is not cv
        assert fork.vector is not cv.vector

    def test_equality_ignores_capabilities(self, fixed_seed):
        seed, _ = fixed_seed
        a = CorrelationVector.create_from_seed(seed)
        b = CorrelationVector.create_from_seed(seed, random_source=FixedRandomSource())
        assert a == b

    def test_base_is_never_mutated(self):
        cv = CorrelationVector.create_from_seed(uuid.UUID(int=7))
        base = cv.base
        for _ in range(200):
            cv.extend()
            cv.increment()
            cv.spin()
        assert cv.base == base
