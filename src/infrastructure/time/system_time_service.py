"""System clock adapter."""
from datetime import datetime, timezone

from src.domain.base.ports.time_service_port import TimeService


class SystemTimeService(TimeService):
    """Humble object over the system clock.

    Only forwards to the standard library. Keep branching out of here: any
    logic added to this class can not be covered by tests that replace it.
    """

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
