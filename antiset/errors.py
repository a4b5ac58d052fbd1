class UnsupportedOperationError(NotImplementedError):
    """Raised when an operation needs the elements of an anti-set.

    An anti-set stands for the universe minus finitely many elements, so it
    can be neither enumerated nor counted.
    """

    def __init__(self, operation: str):
        super().__init__(
            f"cannot {operation} an anti-set (it is infinitely large)")
        self.operation = operation


class InvalidSetError(TypeError):
    """Raised when a value is neither a finite set nor an anti-set."""

    def __init__(self, value, expected: str = "a set or an AntiSet"):
        super().__init__(f"expected {expected}, got {type(value).__name__}")
        self.value = value
