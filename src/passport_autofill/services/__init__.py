"""Parsing pipeline stages and document tools."""
