"""Portfolio risk, return and allocation calculations, back-test schedules and components."""

__version__ = "0.1.0"