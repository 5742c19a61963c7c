"""Shared base layer: errors, logging, transport, and wire constants."""
