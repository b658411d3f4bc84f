"""Domain rules that do not depend on FastAPI or storage."""
