"""Pydantic request and response schemas for the public API."""
