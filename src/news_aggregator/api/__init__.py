"""HTTP API for the News Aggregator."""
