"""Infrastructure adapters: persistence, file storage, email."""
