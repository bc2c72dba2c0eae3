"""Anti-chess rule engine: captures are mandatory, losing every piece ends the game."""

__version__ = "1.0.0"
