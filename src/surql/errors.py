class SurqlError(Exception):
    """Base exception for all surql errors."""
    pass

class SurqlEncodeError(SurqlError):
    """Raised when a value cannot be rendered as a literal."""
    def __init__(self, func, value):
        errmsg = '%s() expects str, got %s' % (func, type(value).__name__)
        super().__init__(errmsg)
        self.func = func
        self.value = value
