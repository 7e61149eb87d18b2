"""Membership verification API: member store, audit log, admin PIN guard."""

__version__ = "0.1.0"
