"""Core infrastructure: settings, logging, error taxonomy and the store."""
