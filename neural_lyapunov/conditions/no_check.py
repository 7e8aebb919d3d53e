"""Marker returned by get_condition when a residual should be omitted."""

class _NoCheckType:
    """Marker type for omitted residuals.

    Distinct from None so that a disabled check is never confused with a
    missing implementation. Falsy, and a singleton.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return 'NoCheck'

    def __reduce__(self):
        return (_NoCheckType, ())

NoCheck = _NoCheckType()
