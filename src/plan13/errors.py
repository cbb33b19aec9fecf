"""Exception types raised by plan13.

All errors are local and recoverable: callers can re-supply elements,
loosen the solver settings or reject the input.  Each one also derives from
the built-in exception it specialises, so generic ``ValueError`` or
``ArithmeticError`` handlers keep working.
"""


class Plan13Error(Exception):
    """Base class for every plan13 error."""


class MalformedElementSet(Plan13Error, ValueError):
    """A required TLE field could not be parsed as a number.

    Attributes:
        field: Name of the offending field.
        text: Raw column text that failed to parse.
    """

    def __init__(self, field: str, text: str, line_number: int) -> None:
        self.field = field
        self.text = text
        self.line_number = line_number
        super().__init__(
            f"TLE line {line_number} field '{field}' is not a number: {text!r}"
        )


class NonConvergentAnomalySolution(Plan13Error, ArithmeticError):
    """Kepler's equation did not converge within the iteration cap.

    Attributes:
        mean_anomaly: Mean anomaly being solved for [rad].
        eccentricity: Orbit eccentricity.
        iterations: Number of Newton steps taken.
    """

    def __init__(self, mean_anomaly: float, eccentricity: float, iterations: int) -> None:
        self.mean_anomaly = mean_anomaly
        self.eccentricity = eccentricity
        self.iterations = iterations
        super().__init__(
            f"Eccentric anomaly did not converge after {iterations} iterations "
            f"(M={mean_anomaly}, e={eccentricity})"
        )


class DegenerateRangeVector(Plan13Error, ArithmeticError):
    """Observer and target are co-located, so no look direction exists."""

    def __init__(self, range_km: float) -> None:
        self.range_km = range_km
        super().__init__(f"Range vector magnitude {range_km} km is too small to normalise")
