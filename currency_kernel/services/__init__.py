"""Services that combine the pure core with reference-data lookups."""
