"""Host integration utilities."""
