"""Test doubles shared across test suites."""
