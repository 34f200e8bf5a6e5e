"""tmdr - Too Medical; Didn't Read. Medical acronym lookup."""

__version__ = "0.1.0"
