"""SpectroSPC - I-MR statistical process control for spectrophotometer readings."""

__version__ = "0.1.0"
