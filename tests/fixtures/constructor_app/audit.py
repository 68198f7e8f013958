from __future__ import annotations

from beanwire import Inject, component, inject
from tests.fixtures.constructor_app.clock import Clock, Metrics


@component
class AuditTrail:
    metrics: Inject[Metrics]

    def __init__(self, clock: Clock, started_at: int) -> None:
        self.clock = clock
        self.started_at = started_at

    @classmethod
    @inject
    def create(cls, clock: Clock) -> AuditTrail:
        return cls(clock, clock.now())
