import io
import time

import pytest

from storefront.cli import main, parse_date, print_separator


@pytest.mark.parametrize("text", ["2025-08-15", "2024-01-01", "2025-09-01"])
def test_parse_date_round_trip(text):
    stamp = parse_date(text)
    local = time.localtime(stamp)
    year, month, day = (int(part) for part in text.split("-"))
    assert (local.tm_year, local.tm_mon, local.tm_mday) == (year, month, day)
    assert (local.tm_hour, local.tm_min) == (0, 0)


def test_parse_date_orders_dates():
    assert parse_date("2024-01-01") < parse_date("2025-08-15")


@pytest.mark.parametrize("text", ["2025/08/15", "2025-08", "not-a-date"])
def test_parse_date_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_date(text)


def test_print_separator_layout():
    out = io.StringIO()
    print_separator("E-COMMERCE SYSTEM", out)
    lines = out.getvalue().split("\n")
    assert lines[0] == ""
    assert lines[1] == "=" * 50
    assert lines[2] == "  E-COMMERCE SYSTEM"
    assert lines[3] == "=" * 50


def test_main_runs_all_scenarios(capsys):
    assert main([]) == 0
    text = capsys.readouterr().out
    assert "TEST CASE 5: Digital-Only Purchase" in text
    assert "Insufficient balance for checkout." in text
    assert "Failed to add Gaming Laptop to the cart." in text
    assert "Item Expired Milk is either expired or insufficient quantity." in text
    assert "Checkout failed due to item issues (expired or insufficient quantity)." in text
    assert text.count("Checkout successful. Remaining balance:") >= 1