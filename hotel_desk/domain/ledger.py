"""
ReservationLedger port — where the desk keeps its active reservations.
"""

from abc import ABC, abstractmethod

from hotel_desk.domain.reservation import Reservation


class ReservationLedger(ABC):
    """
    Port: an ordered collection of active reservations.

    The ledger only stores; it does not enforce business rules.  The
    ReservationManager decides what may be appended or removed, and
    serializes access, so implementations need no locking of their own.
    """

    @abstractmethod
    def append(self, reservation: Reservation) -> None:
        """Store a reservation after all existing ones."""
        ...

    @abstractmethod
    def remove(self, reservation_id: int) -> Reservation | None:
        """Remove and return the reservation with this ID, or None if absent."""
        ...

    @abstractmethod
    def get(self, reservation_id: int) -> Reservation | None:
        """Return the stored reservation with this ID, or None."""
        ...

    @abstractmethod
    def all(self) -> list[Reservation]:
        """Return every stored reservation, in insertion order."""
        ...

    def holders_of(self, names: list[str]) -> dict[str, int]:
        """Map each of the given client names that is already booked to its reservation ID."""
        wanted = set(names)
        found: dict[str, int] = {}
        for reservation in self.all():
            for client in reservation.clients:
                if client.name in wanted and client.name not in found:
                    found[client.name] = reservation.reservation_id
        return found
