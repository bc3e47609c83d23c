"""Core domain: models, ports, errors and encoding."""
