"""Read cosmic-ray measurement tables from several sources and write them in one uniform text format."""

__version__ = "0.1.0"