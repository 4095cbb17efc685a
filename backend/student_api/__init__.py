"""Student records API: FastAPI routes over a SQLModel-backed document store."""
