"""Core domain: models, reading log, I-MR engine and monitoring session."""
