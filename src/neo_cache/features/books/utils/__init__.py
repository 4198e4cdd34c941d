"""Book feature utilities."""
