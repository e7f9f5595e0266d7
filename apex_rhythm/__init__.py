"""ApexRhythm — ultradian performance scheduling for competitive gaming."""

__version__ = "4.0.2"
