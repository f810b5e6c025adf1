import pytest

from gateway_connect.currency import CurrencyTable, ISO4217
from gateway_connect.exceptions import PaymentError, UnknownCurrency


@pytest.mark.parametrize(
    "alpha3, numeric",
    [("RUB", "643"), ("USD", "840"), ("EUR", "978"), ("KZT", "398"), ("ALL", "008")],
)
def test_numeric_code(alpha3, numeric):
    assert ISO4217.numeric(alpha3) == numeric


def test_lookup_is_case_insensitive():
    assert ISO4217.numeric("rub") == "643"
    assert "eur" in ISO4217


def test_get_by_alpha3_returns_entry():
    entry = ISO4217.get_by_alpha3("JPY")
    assert entry == {"alpha3": "JPY", "numeric": "392", "exp": 0, "name": "Yen"}


def test_numeric_codes_are_unique_three_digit_strings():
    codes = [ISO4217.numeric(row) for row in ("RUB", "USD", "GBP", "CNY", "BYN")]
    assert all(len(c) == 3 and c.isdigit() for c in codes)
    assert len(set(codes)) == len(codes)


@pytest.mark.parametrize("code", ["XYZ", "RUR", "", "RUBL"])
def test_unknown_code_raises(code):
    with pytest.raises(UnknownCurrency) as exc:
        ISO4217.numeric(code)
    assert exc.value.code == code
    assert isinstance(exc.value, PaymentError)
    assert isinstance(exc.value, LookupError)


def test_custom_table():
    table = CurrencyTable([("TST", "999", 2, "Test")])
    assert len(table) == 1
    assert table.numeric("TST") == "999"
    assert table.find("RUB") is None
    with pytest.raises(UnknownCurrency):
        table.numeric("RUB")


def test_iterates_over_all_entries():
    entries = list(ISO4217)
    assert len(entries) == len(ISO4217)
    assert {"alpha3": "RUB", "numeric": "643", "exp": 2, "name": "Russian Ruble"} in entries
    # копии: правка записи не меняет таблицу
    entries[0]["numeric"] = "000"
    assert ISO4217.numeric(entries[0]["alpha3"]) != "000"
