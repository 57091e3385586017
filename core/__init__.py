"""Core layer - domain types, service contract, settings, and infrastructure."""
