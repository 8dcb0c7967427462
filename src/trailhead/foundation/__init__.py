"""Foundation layer: errors, config, logging and shared utilities.

Nothing in here knows about projects or launching.
"""
