"""Vote aggregation and feed ranking core for the Tiredd client."""

__version__ = "0.1.0"
