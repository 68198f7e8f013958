from __future__ import annotations

from beanwire import component


@component
class HealthyService:
    pass
