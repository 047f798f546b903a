"""
Desk walkthrough for the reservation manager.

Runs three scenarios against a fresh ReservationManager each:
  1. booking        two reservations, then a third one reusing a client
  2. cancellation   three reservations, two cancelled, one cancelled twice
  3. pricing        two equivalent reservations must cost the same

Usage:
    python scripts/demo.py

Environment variables (all optional):
    HOTEL_NAME            - name printed on reservations (default: Hotel Luchadores)
    PRICE_PER_CLIENT      - nightly price per client (default: 20.00)
    BREAKFAST_MULTIPLIER  - price factor when breakfast is included (default: 1.25)
    LOG_LEVEL             - logging level (default: INFO)

Exit status is the number of failed checks.
"""

import logging
import os
import sys

# Make sure project root is on sys.path when run as a script
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hotel_desk.config import config_from_env
from hotel_desk.domain.reservation import Client
from hotel_desk.manager import ManagerConfig, ReservationManager

log = logging.getLogger(__name__)


def _check(condition: bool, label: str) -> int:
    if condition:
        log.info("  ok    %s", label)
        return 0
    log.error("  FAIL  %s", label)
    return 1


def booking_scenario(config: ManagerConfig) -> int:
    manager = ReservationManager(config)
    goku = Client(name="Goku", age=35, height=180)
    vegeta = Client(name="Vegeta", age=45, height=170)
    bulma = Client(name="Bulma", age=25, height=160)

    manager.add_reservation([goku, vegeta], duration=2, has_breakfast=True)
    manager.add_reservation([bulma], duration=3, has_breakfast=False)
    current = manager.current_reservations()

    failures = _check(len(current) == 2, "two reservations stored")
    failures += _check(current[0].reservation_id == 0, "first reservation has id 0")
    failures += _check(current[0].hotel_name == config.hotel_name, "hotel name set")
    failures += _check(current[1].duration == 3, "duration kept")
    failures += _check(current[1].has_breakfast is False, "breakfast flag kept")

    again = manager.add_reservation([bulma], duration=4, has_breakfast=True)
    failures += _check(again.error == "client_duplicated", "duplicate client rejected")
    return failures


def cancellation_scenario(config: ManagerConfig) -> int:
    manager = ReservationManager(config)
    first = manager.add_reservation([Client("Krilin", 30, 180)], 2, True).unwrap()
    manager.add_reservation([Client("Bulma", 25, 160)], 3, False)
    third = manager.add_reservation(
        [Client("Goku", 35, 180), Client("Vegeta", 45, 170)], 4, True
    ).unwrap()

    manager.cancel_reservation(first.reservation_id)
    manager.cancel_reservation(third.reservation_id)
    current = manager.current_reservations()

    failures = _check(len(current) == 1, "one reservation left")
    failures += _check(current[0].reservation_id == 1, "the right reservation was kept")

    again = manager.cancel_reservation(first.reservation_id)
    failures += _check(again.error == "reservation_not_found", "repeated cancel rejected")
    return failures


def pricing_scenario(config: ManagerConfig) -> int:
    manager = ReservationManager(config)
    manager.add_reservation([Client("Goku", 35, 180), Client("Vegeta", 45, 170)], 2, True)
    manager.add_reservation([Client("Bulma", 25, 160), Client("Krilin", 30, 180)], 2, True)
    first, second = manager.current_reservations()

    expected = 2 * config.price_per_client * config.breakfast_multiplier * 2
    failures = _check(first.price == expected, f"price is {expected:.2f}")
    failures += _check(first.price == second.price, "equivalent reservations cost the same")
    return failures


def main() -> int:
    config = config_from_env()
    log.info("Desk walkthrough for %s", config.hotel_name)

    failures = 0
    for name, scenario in (
        ("booking", booking_scenario),
        ("cancellation", cancellation_scenario),
        ("pricing", pricing_scenario),
    ):
        log.info("Scenario: %s", name)
        failures += scenario(config)

    log.info("Done: %d failed check(s)", failures)
    return failures


if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s  %(levelname)-7s  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    sys.exit(main())
