"""Shared infrastructure: configuration, exceptions, logging, CLI."""
