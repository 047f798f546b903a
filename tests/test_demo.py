"""
The desk walkthrough script must pass all of its own checks.
"""

from hotel_desk.manager import ManagerConfig
from scripts.demo import booking_scenario, cancellation_scenario, main, pricing_scenario


def test_each_scenario_passes():
    cfg = ManagerConfig()
    assert booking_scenario(cfg) == 0
    assert cancellation_scenario(cfg) == 0
    assert pricing_scenario(cfg) == 0


def test_scenarios_follow_custom_tariff():
    cfg = ManagerConfig(hotel_name="Kame House", price_per_client=12.0, breakfast_multiplier=1.5)
    assert booking_scenario(cfg) == 0
    assert pricing_scenario(cfg) == 0


def test_main_reports_zero_failures(monkeypatch):
    for name in ("HOTEL_NAME", "PRICE_PER_CLIENT", "BREAKFAST_MULTIPLIER"):
        monkeypatch.delenv(name, raising=False)
    assert main() == 0
