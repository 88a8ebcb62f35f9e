"""Helpers shared by the browser suites."""
