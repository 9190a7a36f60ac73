"""Tests for the Mash seeding hash."""

import pytest

from py_alea.core.mash import (
    MASH_INITIAL,
    Mash,
    MashFast,
    seed_to_text,
    utf16_code_units,
)


class TestUtf16CodeUnits:
    """Test UTF-16 code unit splitting."""

    def test_ascii(self):
        assert utf16_code_units("abc") == [97, 98, 99]

    def test_empty(self):
        assert utf16_code_units("") == []

    def test_basic_plane(self):
        assert utf16_code_units("é€") == [0xE9, 0x20AC]

    def test_astral_becomes_surrogate_pair(self):
        """Characters outside the BMP contribute two code units."""
        assert utf16_code_units("\U0001F600") == [0xD83D, 0xDE00]

    def test_lone_surrogate(self):
        assert utf16_code_units("\ud800") == [0xD800]


class TestSeedToText:
    """Test JS-style stringification of seeds."""

    def test_values(self):
        assert seed_to_text("abc") == "abc"
        assert seed_to_text(123) == "123"
        assert seed_to_text(1.0) == "1"
        assert seed_to_text(0.5) == "0.5"
        assert seed_to_text(True) == "true"
        assert seed_to_text(False) == "false"

    @pytest.mark.parametrize("value, expected", [
        (1e21, "1e+21"),
        (1e20, "100000000000000000000"),
        (10 ** 22, "1e+22"),
        (1e-7, "1e-7"),
        (1e-6, "0.000001"),
        (1.5e16, "15000000000000000"),
        (123.456, "123.456"),
        (-2.5, "-2.5"),
        (2.5e-10, "2.5e-10"),
        (-0.0, "0"),
        (float("nan"), "NaN"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
    ])
    def test_js_number_formatting(self, value, expected):
        """Numbers use JS exponent thresholds and spellings."""
        assert seed_to_text(value) == expected


class TestMash:
    """Test the JS-faithful Mash hash."""

    @pytest.mark.parametrize("text, expected", [
        ("", -0.06335230986587703),
        (" ", -0.1366710769943893),
        ("frank", 0.044354382902383804),
    ])
    def test_fresh_hash(self, text, expected):
        """Known answers from a fresh accumulator."""
        assert Mash().hash(text) == expected

    def test_compounding_sequence(self):
        """Successive hashes on one accumulator compound."""
        mash = Mash()
        assert mash.hash("cat") == 0.06714190426282585
        assert mash.hash("rat") == -0.24548634607344866
        assert mash.hash("bat") == 0.05828765174373984
        assert mash.hash(" ") == 0.03728155279532075
        assert mash.hash(" ") == 0.32264634780585766
        assert mash.hash(" ") == -0.356016042875126
        assert mash.hash(" ") == -0.4360403118189424

    def test_not_idempotent(self):
        """Hashing the same text twice gives different results."""
        mash = Mash()
        assert mash.hash("frank") != mash.hash("frank")

    def test_empty_leaves_state(self):
        mash = Mash()
        mash.hash("")
        assert mash.state == MASH_INITIAL

    def test_call_alias(self):
        assert Mash()("frank") == Mash().hash("frank")

    def test_result_range(self):
        mash = Mash()
        for text in ["", "a", "frank", "a much longer seed string", "\U0001F600"]:
            assert -0.5 <= mash.hash(text) < 0.5

    def test_instances_independent(self):
        first, second = Mash(), Mash()
        first.hash("consume state")
        assert second.hash("frank") == 0.044354382902383804


class TestMashFast:
    """Test the truncating Mash variant."""

    def test_empty(self):
        """An empty string returns the unwrapped initial state."""
        assert MashFast().hash("") == MASH_INITIAL * 2.0 ** -32

    def test_integral_state(self):
        """The accumulator only ever holds whole numbers."""
        mash = MashFast()
        for text in [" ", "frank", "cat"]:
            mash.hash(text)
            assert mash.state == int(mash.state)

    def test_congruent_with_mash_for_frank(self):
        """For an ordinary seed both hashes agree modulo 1."""
        exact, fast = Mash(), MashFast()
        for text in [" ", " ", " ", "frank", "frank", "frank"]:
            assert (fast.hash(text) - exact.hash(text)) % 1.0 == 0.0

    def test_not_idempotent(self):
        mash = MashFast()
        assert mash.hash("frank") != mash.hash("frank")
