"""Project-level configuration for the fact fetcher."""
