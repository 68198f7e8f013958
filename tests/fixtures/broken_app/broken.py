from __future__ import annotations

import beanwire_missing_dependency  # noqa: F401

from beanwire import component


@component
class BrokenService:
    pass
