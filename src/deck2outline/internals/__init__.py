"""Configuration, logging, paths, and run-context plumbing."""
