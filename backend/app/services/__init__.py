"""Store-level services used by the API routes."""
