"""Verifiable statistics and fixed-point commitments for time series."""
