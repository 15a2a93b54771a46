"""Tests for the seeded selection generator."""
import pytest

from booking_ui.errors import InvalidArgument
from booking_ui.seeded_random import (
    UINT32_MASK,
    ZERO_SEED_SUBSTITUTE,
    SeededRandom,
    create,
    effective_seed,
    worker_index_from_env,
)


class TestSequence:
    def test_known_xorshift32_values_from_seed_1(self):
        rng = SeededRandom(1)
        assert rng.next() == 270369
        assert rng.next() == 67634689

    def test_same_seed_same_sequence(self):
        a, b = SeededRandom(123456789), create(123456789)
        assert [a.next() for _ in range(500)] == [b.next() for _ in range(500)]

    def test_different_seeds_diverge(self):
        a, b = SeededRandom(42), SeededRandom(43)
        assert [a.next() for _ in range(10)] != [b.next() for _ in range(10)]

    def test_draws_stay_within_uint32(self):
        rng = SeededRandom(0xDEADBEEF)
        for _ in range(1000):
            value = rng.next()
            assert 0 <= value <= UINT32_MASK

    def test_state_tracks_last_draw(self):
        rng = SeededRandom(7)
        value = rng.next()
        assert rng.state == value
        assert rng.seed == 7


class TestSeedNormalization:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            (-1, 0xFFFFFFFF),
            (2 ** 32 + 5, 5),
            (42, 42),
        ],
    )
    def test_seed_masked_to_uint32(self, raw, expected):
        assert SeededRandom(raw).seed == expected

    def test_masked_seed_behaves_like_its_uint32_value(self):
        a, b = SeededRandom(-1), SeededRandom(0xFFFFFFFF)
        assert [a.next() for _ in range(20)] == [b.next() for _ in range(20)]

    def test_zero_seed_is_escaped(self):
        rng = SeededRandom(0)
        assert rng.seed == 0
        assert rng.state == ZERO_SEED_SUBSTITUTE

        draws = [rng.next() for _ in range(10)]
        assert all(draw != 0 for draw in draws)

        escaped = SeededRandom(ZERO_SEED_SUBSTITUTE)
        assert draws == [escaped.next() for _ in range(10)]

    def test_seed_2_pow_32_is_also_zero(self):
        assert SeededRandom(2 ** 32).state == ZERO_SEED_SUBSTITUTE


class TestBoundedDraws:
    @pytest.mark.parametrize("length", [1, 2, 5, 7, 100, 1000])
    def test_pick_index_in_range(self, length):
        rng = SeededRandom(2024)
        for _ in range(1000):
            assert 0 <= rng.pick_index(length) < length

    @pytest.mark.parametrize("length", [0, -1, -100])
    def test_pick_index_rejects_empty_without_consuming(self, length):
        rng = SeededRandom(99)
        before = rng.state
        with pytest.raises(InvalidArgument, match="empty"):
            rng.pick_index(length)
        assert rng.state == before

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            SeededRandom(1).pick_index(0)

    def test_degenerate_range_returns_min(self):
        rng = SeededRandom(31337)
        assert all(rng.int(4, 4) == 4 for _ in range(200))

    def test_int_respects_bounds(self):
        rng = SeededRandom(5)
        values = {rng.int(-3, 3) for _ in range(2000)}
        assert values <= set(range(-3, 4))
        assert len(values) == 7

    def test_int_rejects_inverted_range(self):
        rng = SeededRandom(5)
        before = rng.state
        with pytest.raises(InvalidArgument):
            rng.int(5, 4)
        assert rng.state == before

    def test_int_is_min_plus_draw_modulo_span(self):
        a, b = SeededRandom(77), SeededRandom(77)
        assert a.int(10, 19) == 10 + b.next() % 10

    def test_pick_returns_item_at_picked_index(self):
        a, b = SeededRandom(8), SeededRandom(8)
        items = ["AMS", "RTM", "EIN", "GRQ"]
        assert a.pick(items) == items[b.pick_index(len(items))]


class TestWorkerSeeding:
    def test_worker_zero_keeps_seed(self):
        assert effective_seed(42, 0) == 42

    def test_worker_offset_added(self):
        assert effective_seed(42, 3) == 45

    def test_effective_seed_wraps(self):
        assert effective_seed(0xFFFFFFFF, 1) == 0

    def test_negative_worker_rejected(self):
        with pytest.raises(InvalidArgument):
            effective_seed(42, -1)

    def test_seed_42_pick_is_reproducible_across_runs(self):
        first_run = SeededRandom(effective_seed(42, 0))
        second_run = SeededRandom(effective_seed(42, 0))
        picks = [first_run.pick_index(5) for _ in range(20)]
        assert picks == [second_run.pick_index(5) for _ in range(20)]
        assert all(0 <= pick < 5 for pick in picks)

    def test_workers_get_distinct_sequences(self):
        w0 = SeededRandom(effective_seed(42, 0))
        w1 = SeededRandom(effective_seed(42, 1))
        assert [w0.next() for _ in range(5)] != [w1.next() for _ in range(5)]

    @pytest.mark.parametrize(
        "environ,expected",
        [
            ({}, 0),
            ({"PYTEST_XDIST_WORKER": "gw3"}, 3),
            ({"PYTEST_XDIST_WORKER": "master"}, 0),
            ({"TEST_WORKER_INDEX": "2"}, 2),
            ({"TEST_WORKER_INDEX": "5", "PYTEST_XDIST_WORKER": "gw1"}, 5),
        ],
    )
    def test_worker_index_from_env(self, environ, expected):
        assert worker_index_from_env(environ) == expected

    def test_malformed_worker_index_rejected(self):
        with pytest.raises(InvalidArgument):
            worker_index_from_env({"TEST_WORKER_INDEX": "two"})
