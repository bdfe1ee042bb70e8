"""Domain layer for diary-sync."""
