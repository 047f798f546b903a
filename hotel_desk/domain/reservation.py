"""
Reservation value types and pricing.

A Reservation is created whole by the ReservationManager and never
changed afterwards; the only way to "edit" one is to cancel it and
book again.
"""

from dataclasses import dataclass

DEFAULT_HOTEL_NAME = "Hotel Luchadores"
DEFAULT_PRICE_PER_CLIENT = 20.0
DEFAULT_BREAKFAST_MULTIPLIER = 1.25


@dataclass(frozen=True)
class Client:
    """A guest named on a reservation. The name is the uniqueness key."""

    name: str
    age: int
    height: int  # cm


@dataclass(frozen=True)
class Reservation:
    """An immutable booking for one or more clients."""

    reservation_id: int
    hotel_name: str
    clients: tuple[Client, ...]
    duration: int        # nights
    price: float
    has_breakfast: bool


def compute_price(
    client_count: int,
    duration: int,
    has_breakfast: bool,
    price_per_client: float = DEFAULT_PRICE_PER_CLIENT,
    breakfast_multiplier: float = DEFAULT_BREAKFAST_MULTIPLIER,
) -> float:
    """Price = clients × per-client price × breakfast multiplier × nights."""
    multiplier = breakfast_multiplier if has_breakfast else 1.0
    return client_count * price_per_client * multiplier * duration
