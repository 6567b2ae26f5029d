"""Controllers coordinating tournament operations."""
