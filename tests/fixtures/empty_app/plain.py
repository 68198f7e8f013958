class PlainService:
    """Not decorated with ``@component``; scanning ignores it."""


class AnotherPlainService:
    pass
