"""actrgen HTTP API."""
