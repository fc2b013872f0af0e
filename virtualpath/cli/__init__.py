"""Command-line entry points for virtualpath."""
