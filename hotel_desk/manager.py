"""
Reservation manager for the hotel desk.

Owns the active reservations (through a ReservationLedger) and the ID
counter.  Three operations:

  add_reservation()      validate → check duplicates → price → assign ID → store
  cancel_reservation()   remove one reservation by ID
  current_reservations() read-only snapshot, insertion order

Nothing is raised for business failures: each operation returns a result
object carrying either the outcome or an error kind.  A failed operation
never changes state, and never consumes a reservation ID.
"""

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass

from hotel_desk.adapters.memory_ledger import InMemoryReservationLedger
from hotel_desk.domain.errors import AddResult, CancelResult, ErrorKind
from hotel_desk.domain.ledger import ReservationLedger
from hotel_desk.domain.reservation import (
    DEFAULT_BREAKFAST_MULTIPLIER,
    DEFAULT_HOTEL_NAME,
    DEFAULT_PRICE_PER_CLIENT,
    Client,
    Reservation,
    compute_price,
)

log = logging.getLogger(__name__)


@dataclass
class ManagerConfig:
    hotel_name: str = DEFAULT_HOTEL_NAME
    price_per_client: float = DEFAULT_PRICE_PER_CLIENT
    breakfast_multiplier: float = DEFAULT_BREAKFAST_MULTIPLIER


class ReservationManager:
    """
    One hotel desk.  Construct it once and pass it to whoever needs it.

    All operations are serialized by a lock, so concurrent callers can
    never see the same next ID or both pass the duplicate check for the
    same client.
    """

    def __init__(
        self,
        config: ManagerConfig | None = None,
        ledger: ReservationLedger | None = None,
    ):
        self._cfg = config or ManagerConfig()
        self._ledger = ledger if ledger is not None else InMemoryReservationLedger()
        self._next_id = 0
        self._lock = threading.Lock()

    def add_reservation(
        self,
        clients: Sequence[Client],
        duration: int,
        has_breakfast: bool,
    ) -> AddResult:
        """Book a new reservation for the given clients."""
        clients = tuple(clients)
        log.debug(
            "add clients=%s duration=%d breakfast=%s",
            [c.name for c in clients], duration, has_breakfast,
        )

        if not clients:
            return self._reject_add("empty_client_list", "a reservation needs at least one client")
        if duration <= 0:
            return self._reject_add("invalid_duration", f"duration must be positive, got {duration}")

        with self._lock:
            holders = self._ledger.holders_of([c.name for c in clients])
            if holders:
                clash = ", ".join(f"{name} (res={rid})" for name, rid in holders.items())
                return self._reject_add("client_duplicated", f"already booked: {clash}")

            reservation_id = self._next_id
            if self._ledger.get(reservation_id) is not None:
                return self._reject_add("same_id", f"reservation {reservation_id} already exists")

            reservation = Reservation(
                reservation_id=reservation_id,
                hotel_name=self._cfg.hotel_name,
                clients=clients,
                duration=duration,
                price=compute_price(
                    len(clients),
                    duration,
                    has_breakfast,
                    price_per_client=self._cfg.price_per_client,
                    breakfast_multiplier=self._cfg.breakfast_multiplier,
                ),
                has_breakfast=has_breakfast,
            )
            self._ledger.append(reservation)
            self._next_id += 1

        log.info(
            "res=%d added clients=%d nights=%d price=%.2f",
            reservation.reservation_id, len(clients), duration, reservation.price,
        )
        return AddResult(reservation=reservation)

    def cancel_reservation(self, reservation_id: int) -> CancelResult:
        """Remove the active reservation with this ID."""
        with self._lock:
            removed = self._ledger.remove(reservation_id)

        if removed is None:
            log.info("res=%d cancel rejected: reservation_not_found", reservation_id)
            return CancelResult(
                reservation_id=reservation_id,
                error="reservation_not_found",
                details=f"no active reservation with id {reservation_id}",
            )

        log.info("res=%d cancelled", reservation_id)
        return CancelResult(reservation_id=reservation_id)

    def current_reservations(self) -> tuple[Reservation, ...]:
        """Snapshot of active reservations, oldest first."""
        with self._lock:
            return tuple(self._ledger.all())

    @staticmethod
    def _reject_add(error: ErrorKind, details: str) -> AddResult:
        log.info("add rejected: %s (%s)", error, details)
        return AddResult(error=error, details=details)
