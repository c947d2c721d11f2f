"""HTTP API for the filter engine."""
