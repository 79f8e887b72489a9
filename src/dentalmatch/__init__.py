"""Candidate/job matching engine for a dental-sector job marketplace."""

__version__ = "0.1.0"
