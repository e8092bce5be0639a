"""Infrastructure adapters: logging and the FRED HTTP layer."""
