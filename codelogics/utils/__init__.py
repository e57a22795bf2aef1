"""Helpers shared across the application: logging, errors, HTTP and rendering."""
