"""plancli - command line client for the plan service."""

__version__ = "0.1.0"
