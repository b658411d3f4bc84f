"""
Core utilities shared across the Personas API.

This package hosts configuration helpers (env vars, feature flags) and
cross-cutting concerns such as logging setup. Routers and services depend on
these primitives instead of reading os.environ themselves.
"""
