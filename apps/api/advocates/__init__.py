"""Advocate directory search API and client."""
