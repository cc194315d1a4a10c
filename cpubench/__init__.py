"""Classic CPU benchmarks: the Stanford small-program suite, Linpack and Dhrystone."""

__version__ = "0.1.0"