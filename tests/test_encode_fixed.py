import pytest

HEX64 = "fded3f55dec47250a52a8c0bb7038e72fa6ffaae33562f77cd2b629ef7fd424d"
HEX64_BYTES = [
    253, 237, 63, 85, 222, 196, 114, 80, 165, 42, 140, 11, 183,
    3, 142, 114, 250, 111, 250, 174, 51, 86, 47, 119, 205, 43,
    98, 158, 247, 253, 66, 77,
]

@pytest.mark.parametrize(
    "text,expected",
    [
        ("0x1", [1]),
        ("0x928374892abc", [146, 131, 116, 137, 42, 188]),
        ("0x" + HEX64, HEX64_BYTES),
    ],
)
def test_fixed_hex(encoder, text, expected):
    assert list(encoder.bytes_lit(text)) == expected

@pytest.mark.parametrize(
    "text,expected",
    [
        ("340_282_366_920_938_463_463_374_607_431_768_211_455", [255] * 16),
        ("340_282_366_920_938_463_463_374_607_431_768_211_456", [1] + [0] * 16),
        ("255", [255]),
        ("256", [1, 0]),
        ("0", [0]),
        # Decimal digit counts carry no byte alignment: fixed == minimal.
        ("0255", [255]),
        ("00255", [255]),
        ("000", [0]),
    ],
)
def test_fixed_decimal(encoder, text, expected):
    assert list(encoder.bytes_lit(text)) == expected

@pytest.mark.parametrize(
    "text,expected",
    [
        # Base 16.
        ("0x1", [1]),
        ("0x01", [1]),
        ("0x001", [0, 1]),
        ("0x0001", [0, 1]),
        ("0x0_0_0_1", [0, 1]),
        ("0x00001", [0, 0, 1]),
        ("0x0", [0]),
        ("0x00", [0]),
        ("0x000", [0, 0]),
        ("0x0000", [0, 0]),
        ("0x1ff", [1, 255]),
        ("0x00ff", [0, 255]),
        # Base 2.
        ("0b1", [1]),
        ("0b11", [3]),
        ("0b111", [7]),
        ("0b1111", [15]),
        ("0b11111", [31]),
        ("0b111111", [63]),
        ("0b1111111", [127]),
        ("0b11111111", [255]),
        ("0b111111111", [1, 255]),
        ("0b01", [1]),
        ("0b001", [1]),
        ("0b0001", [1]),
        ("0b00001", [1]),
        ("0b000001", [1]),
        ("0b0000001", [1]),
        ("0b00000001", [1]),
        ("0b000000001", [0, 1]),
        ("0b0000_0000_0000_0001", [0, 1]),
        ("0b0", [0]),
        ("0b000000000", [0, 0]),
    ],
)
def test_fixed_leading_zeros_preserved(encoder, text, expected):
    assert list(encoder.bytes_lit(text)) == expected

def test_fixed_65_hex_digits_keeps_leading_zero_byte(encoder):
    text = "0x0" + HEX64
    data = encoder.bytes_lit(text)
    assert len(data) == 33
    assert list(data) == [0] + HEX64_BYTES

def test_fixed_two_leading_zero_digits_are_one_byte(encoder):
    data = encoder.bytes_lit("0x00" + HEX64)
    assert len(data) == 33
    assert list(data[:3]) == [0, 253, 237]

@pytest.mark.parametrize("text", ["0255", "00255", "00"])
def test_fixed_strict_refuses_decimal_leading_zeros(encoder, lexer, text):
    with pytest.raises(lexer.InvalidLiteralError) as excinfo:
        encoder.bytes_lit(text, strict=True)
    assert "decimal form" in excinfo.value.reason

@pytest.mark.parametrize(
    "text,expected",
    [("255", [255]), ("0", [0]), ("0x0001", [0, 1]), ("0b000000001", [0, 1])],
)
def test_fixed_strict_accepts_preservable_literals(encoder, text, expected):
    assert list(encoder.bytes_lit(text, strict=True)) == expected

@pytest.mark.parametrize("policy", ["fixed", "FIXED", "Fixed"])
def test_policy_accepts_strings(encoder, lexer, policy):
    assert encoder.encode(lexer.parse("0x0001"), policy) == b"\x00\x01"

def test_unknown_policy(encoder, lexer):
    with pytest.raises(ValueError):
        encoder.encode(lexer.parse("0x1"), "widest")

@pytest.mark.parametrize(
    "text,width",
    [("0x1", 1), ("0x001", 2), ("0x" + "0" * 65, 33), ("0b1", 1), ("0b" + "1" * 17, 3), ("1000", None)],
)
def test_fixed_width(encoder, lexer, text, width):
    assert encoder.fixed_width(lexer.parse(text)) == width
