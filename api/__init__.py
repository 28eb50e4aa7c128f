"""HTTP API dla Spire of the Path."""
