"""clean-scaffold - Generate clean architecture boilerplate for one entity."""

__version__ = "0.1.0"
