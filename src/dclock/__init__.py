"""dclock — decimal clock that maps each day to 1000 decimal minutes."""

__version__ = "0.3.0"
