"""Note parsing, outline building, and raw-slide readers."""
