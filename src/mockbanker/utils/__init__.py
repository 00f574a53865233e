"""Shared helpers: exceptions, logging and character tables."""
