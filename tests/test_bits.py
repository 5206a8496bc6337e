import pytest

from dsakit.bits import round_up_pow2


@pytest.mark.parametrize("bits", [8, 16, 32, 64])
def test_result_is_smallest_power_of_two_not_below_value(bits):
    for value in range(1, 1 << 7):
        result = round_up_pow2(value, bits)
        assert result >= value
        assert result & (result - 1) == 0
        assert result < 2 * value


@pytest.mark.parametrize("bits", [8, 16, 32, 64])
def test_powers_of_two_are_unchanged(bits):
    for shift in range(bits):
        assert round_up_pow2(1 << shift, bits) == 1 << shift


@pytest.mark.parametrize("bits", [8, 16, 32, 64])
def test_zero_wraps_to_zero(bits):
    assert round_up_pow2(0, bits) == 0


@pytest.mark.parametrize("bits", [8, 16, 32, 64])
def test_values_above_top_power_wrap_to_zero(bits):
    top = 1 << (bits - 1)
    assert round_up_pow2(top + 1, bits) == 0
    assert round_up_pow2((1 << bits) - 1, bits) == 0


def test_default_width_is_64_bits():
    big = (1 << 40) + 1
    assert round_up_pow2(big) == round_up_pow2(big, 64)
    assert round_up_pow2(big) == 1 << 41


def test_unsupported_width_raises():
    with pytest.raises(ValueError):
        round_up_pow2(5, 12)


@pytest.mark.parametrize("value", [-1, 256])
def test_out_of_range_value_raises(value):
    with pytest.raises(ValueError):
        round_up_pow2(value, 8)