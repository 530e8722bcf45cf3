"""SpectroSPC HTTP API."""
