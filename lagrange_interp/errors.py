class InterpolationError(ValueError):
    """Base class for all errors raised by lagrange_interp."""


class LengthMismatchError(InterpolationError):

    def __init__(self, n_x: int, n_y: int) -> None:
        super().__init__(f"X and Y arrays must have the same length (got {n_x} and {n_y})")
        self.n_x = n_x
        self.n_y = n_y


class InvalidSampleCountError(InterpolationError):
    pass


class InputValidationError(InterpolationError):
    """Raised by the input layer; the message is meant for the user."""
