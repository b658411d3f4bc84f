"""Personas API: CRUD service for person records."""
