"""Tests for country detection."""
import pytest

from taxid import COUNTRY_PREFIXES, CountryCode, detect_country


@pytest.mark.unit
class TestPrefixDetection:
    def test_detects_pt_from_prefix(self):
        assert detect_country("PT502011378") == "PT"

    def test_detects_gb_from_prefix(self):
        assert detect_country("GB12345678") == "GB"

    def test_detects_dk_from_prefix(self):
        assert detect_country("DK10150817") == CountryCode.DK

    def test_detects_ch_from_che_prefix(self):
        assert detect_country("CHE105835786") == "CH"
        assert detect_country("CHE-116.281.710") == "CH"

    def test_detects_ch_from_ch_prefix(self):
        assert detect_country("CH105835786") == "CH"

    def test_handles_lowercase_and_separators(self):
        assert detect_country("pt 502-011.378") == "PT"

    @pytest.mark.parametrize("prefix", COUNTRY_PREFIXES)
    def test_handles_all_prefixes(self, prefix):
        assert detect_country(f"{prefix}123456789") == prefix

    def test_prefix_wins_even_if_payload_is_invalid(self):
        assert detect_country("DE12") == "DE"
        assert detect_country("PT!") == "PT"

    def test_bare_prefix_is_not_enough(self):
        assert detect_country("PT") is None
        assert detect_country("CH") is None

    def test_unknown_prefix(self):
        assert detect_country("XX123456789") is None


@pytest.mark.unit
class TestFormatDetection:
    """Prefix-less numbers: 9 digits → PT, 8 digits → DK then CZ."""

    def test_detects_pt_from_9_digits(self):
        assert detect_country("502011378") == "PT"

    def test_detects_dk_from_8_digits(self):
        assert detect_country("10150817") == "DK"

    def test_falls_back_to_cz_when_dk_checksum_fails(self):
        assert detect_country("00000060") == "CZ"

    def test_9_digits_failing_pt_checksum(self):
        assert detect_country("400000000") is None

    def test_8_digits_failing_both_checksums(self):
        assert detect_country("12345678") is None

    def test_returns_none_for_ambiguous_formats(self):
        assert detect_country("12345") is None

    def test_returns_none_for_empty_input(self):
        assert detect_country("") is None
        assert detect_country(None) is None

    def test_dk_is_tried_before_cz(self):
        """25596641 passes both checksums; Denmark wins the tie."""
        assert detect_country("25596641") == "DK"
