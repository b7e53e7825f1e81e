"""Tests for tax ID cleaning helpers."""
import pytest

from taxid.utils.vat import clean_tax_id, strip_country_prefix


class TestCleanTaxId:
    def test_strips_whitespace_dots_hyphens_and_uppercases(self):
        assert clean_tax_id(" pt 502-011.378\t") == "PT502011378"

    def test_keeps_other_punctuation(self):
        assert clean_tax_id("PT/502_011!") == "PT/502_011!"

    def test_none_and_empty(self):
        assert clean_tax_id(None) == ""
        assert clean_tax_id("") == ""

    @pytest.mark.parametrize("raw", ["pt 502-011.378", "che-116.281.710", "nl123456789b01"])
    def test_idempotent(self, raw):
        once = clean_tax_id(raw)
        assert clean_tax_id(once) == once


class TestStripCountryPrefix:
    def test_strips_two_letter_prefix(self):
        assert strip_country_prefix("PT502011378", "PT") == "502011378"

    def test_strips_swiss_uid_prefix(self):
        assert strip_country_prefix("CHE116281710", "CH") == "116281710"
        assert strip_country_prefix("CH116281710", "CH") == "116281710"

    def test_prefixless_number_unchanged(self):
        assert strip_country_prefix("502011378", "PT") == "502011378"
