"""Tests for the modulo-11 checksum validators."""
import pytest

from taxid.validators.checksum import (
    validate_ch,
    validate_cz,
    validate_dk,
    validate_fi,
    validate_no,
    validate_pl,
    validate_pt,
)

# Known-good numbers: (validator, payload)
REFERENCE_NUMBERS = [
    (validate_pt, "502011378"),
    (validate_pt, "509442013"),
    (validate_dk, "10150817"),
    (validate_no, "923609016"),
    (validate_fi, "01234562"),
    (validate_pl, "7740001454"),
    (validate_cz, "25596641"),
    (validate_ch, "116281710"),
]


@pytest.mark.unit
class TestReferenceNumbers:
    """Each checksum jurisdiction accepts its reference number and nothing one digit off."""

    @pytest.mark.parametrize("validator,payload", REFERENCE_NUMBERS)
    def test_known_good_numbers(self, validator, payload):
        result = validator(payload)
        assert result.valid is True, f"{payload} should be valid but got: {result.error}"
        assert result.normalized == payload
        assert result.error is None

    @pytest.mark.parametrize("validator,payload", REFERENCE_NUMBERS)
    @pytest.mark.parametrize("delta", range(1, 10))
    def test_mutated_check_digit_fails_checksum_only(self, validator, payload, delta):
        """Changing the last digit keeps the format valid but breaks the checksum."""
        mutated = payload[:-1] + str((int(payload[-1]) + delta) % 10)
        result = validator(mutated)
        assert result.valid is False
        assert "checksum failed" in result.error
        assert result.normalized == mutated


@pytest.mark.unit
class TestPortugal:
    def test_rejects_wrong_length(self):
        result = validate_pt("50201137")
        assert result.valid is False
        assert result.error == "PT NIF must be 9 digits"

    @pytest.mark.parametrize("first", ["0", "4"])
    def test_rejects_disallowed_first_digit(self, first):
        result = validate_pt(first + "00000000")
        assert result.valid is False
        assert result.error == "PT NIF invalid first digit"

    def test_remainder_zero_means_check_digit_zero(self):
        # 1*9 + 1*2 = 11 → remainder 0
        assert validate_pt("100000010").valid is True

    def test_remainder_one_means_check_digit_zero(self):
        # 1*9 + 1*3 = 12 → remainder 1
        assert validate_pt("100000100").valid is True

    def test_rejects_non_ascii_digits(self):
        result = validate_pt("５０２０１１３７８")
        assert result.valid is False
        assert result.error == "PT NIF must be 9 digits"


@pytest.mark.unit
class TestDenmark:
    def test_rejects_invalid_checksum(self):
        result = validate_dk("12345679")
        assert result.valid is False
        assert result.error == "DK CVR checksum failed"

    def test_rejects_letters(self):
        result = validate_dk("1015081A")
        assert result.valid is False
        assert result.error == "DK CVR must be 8 digits"


@pytest.mark.unit
class TestNorway:
    def test_remainder_one_is_invalid_outright(self):
        # 6*2 = 12 → remainder 1, no check digit exists
        result = validate_no("000000060")
        assert result.valid is False
        assert result.error == "NO org.nr checksum invalid"

    def test_rejects_wrong_checksum(self):
        result = validate_no("923609017")
        assert result.valid is False
        assert result.error == "NO org.nr checksum failed"

    def test_rejects_wrong_length(self):
        assert validate_no("92360901").error == "NO org.nr must be 9 digits"


@pytest.mark.unit
class TestFinland:
    def test_strips_internal_hyphen(self):
        result = validate_fi("0123456-2")
        assert result.valid is True
        assert result.normalized == "01234562"

    def test_remainder_one_is_invalid_outright(self):
        # 3*4 = 12 → remainder 1
        result = validate_fi("00000300")
        assert result.valid is False
        assert result.error == "FI Y-tunnus checksum invalid"

    def test_rejects_wrong_length(self):
        result = validate_fi("0123456")
        assert result.valid is False
        assert result.error == "FI Y-tunnus must be 7 digits + check digit"


@pytest.mark.unit
class TestPoland:
    def test_check_value_ten_is_always_invalid(self):
        # 2*5 = 10 → no single check digit can match
        result = validate_pl("0200000000")
        assert result.valid is False
        assert result.error == "PL NIP checksum failed"

    def test_rejects_wrong_length(self):
        assert validate_pl("774000145").error == "PL NIP must be 10 digits"


@pytest.mark.unit
class TestCzechRepublic:
    def test_remainder_one_means_check_digit_zero(self):
        # 6*2 = 12 → remainder 1 → check digit 0
        assert validate_cz("00000060").valid is True

    @pytest.mark.parametrize("payload", ["123456789", "1234567890"])
    def test_accepts_longer_dic_without_checksum(self, payload):
        result = validate_cz(payload)
        assert result.valid is True
        assert result.normalized == payload

    @pytest.mark.parametrize("payload", ["1234567", "12345678901", "2559664A"])
    def test_rejects_other_shapes(self, payload):
        result = validate_cz(payload)
        assert result.valid is False
        assert result.error == "CZ IČO must be 8 digits"


@pytest.mark.unit
class TestSwitzerland:
    def test_strips_non_digits(self):
        result = validate_ch("116.281.710")
        assert result.valid is True
        assert result.normalized == "116281710"

    def test_remainder_ten_is_invalid_outright(self):
        # 2*5 = 10 → remainder 10
        result = validate_ch("200000000")
        assert result.valid is False
        assert result.error == "CH UID checksum invalid"

    def test_rejects_wrong_length(self):
        result = validate_ch("E11628171")
        assert result.valid is False
        assert result.error == "CH UID must be 9 digits"
        assert result.normalized == "11628171"

    def test_zero_remainder_requires_zero_check_digit(self):
        """105835786: weighted sum 154 → remainder 0 → check digit 0, not 6."""
        result = validate_ch("105835786")
        assert result.valid is False
        assert result.error == "CH UID checksum failed"
