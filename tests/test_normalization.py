"""Tests for market name normalization."""

from cryptomkt.normalization import normalize_market, split_market


class TestNormalizeMarket:
    """Tests for normalize_market."""

    def test_formats(self):
        assert normalize_market("ETHCLP") == "ETHCLP"
        assert normalize_market("ETH-CLP") == "ETHCLP"
        assert normalize_market("eth/clp") == "ETHCLP"

    def test_whitespace_stripped(self):
        assert normalize_market("  ETH - CLP  ") == "ETHCLP"

    def test_empty(self):
        assert normalize_market("") == ""


class TestSplitMarket:
    """Tests for split_market."""

    def test_joined(self):
        assert split_market("ETHCLP") == ("ETH", "CLP")
        assert split_market("BTCARS") == ("BTC", "ARS")
        assert split_market("XLMUSDC") == ("XLM", "USDC")

    def test_separated(self):
        assert split_market("eth-brl") == ("ETH", "BRL")
        assert split_market("EOS/MXN") == ("EOS", "MXN")

    def test_unknown_quote(self):
        assert split_market("FOOBAR") == ("FOOBAR", "")

    def test_empty(self):
        assert split_market("") == ("", "")
