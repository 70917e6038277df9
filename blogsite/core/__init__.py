"""Logging, exceptions and path configuration shared across blogsite."""
