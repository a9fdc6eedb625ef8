"""
general.
=======

Shared, domain-agnostic helpers (config loading, debug tracing).
"""
