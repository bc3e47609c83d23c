"""Encoders turning domain models into transport payloads."""
