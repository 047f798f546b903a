"""
Contract tests for ReservationLedger implementations.
"""

from hotel_desk.adapters.memory_ledger import InMemoryReservationLedger
from tests.contracts.ledger_contract import ReservationLedgerContract, _reservation


class TestInMemoryReservationLedger(ReservationLedgerContract):

    def create_ledger(self):
        return InMemoryReservationLedger()

    def test_isolation_between_instances(self):
        """Two in-memory instances must not share state."""
        l1 = InMemoryReservationLedger()
        l2 = InMemoryReservationLedger()
        l1.append(_reservation(0, "Goku"))
        assert l2.all() == []
