import pytest

from hotel_desk.domain.reservation import compute_price


@pytest.mark.parametrize(
    "clients, nights, breakfast, expected",
    [
        (2, 2, True, 100.0),
        (1, 3, False, 60.0),
        (4, 1, True, 100.0),
        (3, 7, False, 420.0),
    ],
)
def test_default_tariff(clients, nights, breakfast, expected):
    assert compute_price(clients, nights, breakfast) == expected


def test_custom_tariff():
    assert compute_price(2, 5, True, price_per_client=30.0, breakfast_multiplier=1.5) == 450.0


def test_multiplier_ignored_without_breakfast():
    assert compute_price(2, 1, False, breakfast_multiplier=10.0) == 40.0
