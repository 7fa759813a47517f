"""HTTP transport for the dispatcher (FastAPI)."""
