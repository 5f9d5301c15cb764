"""Tome: threaded comments for character pages."""
