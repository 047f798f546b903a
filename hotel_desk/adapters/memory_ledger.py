"""
In-memory ReservationLedger — the desk's only storage; nothing survives a restart.
"""

from hotel_desk.domain.ledger import ReservationLedger
from hotel_desk.domain.reservation import Reservation


class InMemoryReservationLedger(ReservationLedger):

    def __init__(self):
        self._reservations: list[Reservation] = []

    def append(self, reservation: Reservation) -> None:
        self._reservations.append(reservation)

    def remove(self, reservation_id: int) -> Reservation | None:
        for index, reservation in enumerate(self._reservations):
            if reservation.reservation_id == reservation_id:
                return self._reservations.pop(index)
        return None

    def get(self, reservation_id: int) -> Reservation | None:
        return next(
            (r for r in self._reservations if r.reservation_id == reservation_id),
            None,
        )

    def all(self) -> list[Reservation]:
        return list(self._reservations)
