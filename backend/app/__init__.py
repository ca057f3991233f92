"""Book Inventory API backend."""
