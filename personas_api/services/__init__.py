"""
High-level use cases for the Personas API.

Each service module orchestrates repositories and domain rules to implement
business rules (register a person, reject duplicate documents, etc.).

Routers (FastAPI endpoints) call these services instead of opening
database sessions directly.
"""
