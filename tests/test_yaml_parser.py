import pytest

from confscope.yaml_parser import uint8_from_yaml, uint8_to_yaml


@pytest.mark.parametrize("value", [0, 4, 255])
def test_in_range_round_trip(value):
    node = uint8_to_yaml("u8", value)
    assert uint8_from_yaml(node["u8"]) == value


def test_string_scalar_is_parsed():
    assert uint8_from_yaml("5") == 5


def test_overflow():
    with pytest.raises(ValueError, match="Value '256' overflows storage max of '255'."):
        uint8_from_yaml(256)


def test_underflow():
    with pytest.raises(ValueError, match="Value '-1' underflows storage min of '0'."):
        uint8_from_yaml(-1)


def test_non_integer_string_rejected():
    with pytest.raises(ValueError):
        uint8_from_yaml("abc")


def test_float_rejected():
    with pytest.raises(TypeError):
        uint8_from_yaml(2.5)


def test_to_yaml_writes_number_not_character():
    assert uint8_to_yaml("some_character", ord("a")) == {"some_character": 97}