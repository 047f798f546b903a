"""
Outcomes of desk operations.

Every ReservationManager operation returns a result object instead of
raising: either it succeeded, or it carries one error kind and a short
human-readable explanation.  Callers that would rather use exceptions
can call unwrap(), which raises ReservationFailed.

Error kinds:
  same_id                 a freshly generated ID already exists (should never happen)
  client_duplicated       a client already holds an active reservation
  reservation_not_found   no active reservation with that ID
  empty_client_list       a reservation needs at least one client
  invalid_duration        duration must be at least one night
"""

from dataclasses import dataclass
from typing import Literal

from hotel_desk.domain.reservation import Reservation

ErrorKind = Literal[
    "same_id",
    "client_duplicated",
    "reservation_not_found",
    "empty_client_list",
    "invalid_duration",
]


class ReservationDeskError(Exception):
    """Base exception for the reservation desk."""


class ReservationFailed(ReservationDeskError):
    """Raised by unwrap() on a failed result.

    Attributes:
        kind: The ErrorKind of the failed operation.
        details: Explanation, e.g. which client clashed.
    """

    def __init__(self, kind: ErrorKind, details: str = ""):
        super().__init__(f"{kind}: {details}" if details else kind)
        self.kind = kind
        self.details = details


@dataclass(frozen=True)
class AddResult:
    reservation: Reservation | None = None
    error: ErrorKind | None = None
    details: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Reservation:
        if self.error is not None:
            raise ReservationFailed(self.error, self.details)
        assert self.reservation is not None
        return self.reservation


@dataclass(frozen=True)
class CancelResult:
    reservation_id: int
    error: ErrorKind | None = None
    details: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> None:
        if self.error is not None:
            raise ReservationFailed(self.error, self.details)
