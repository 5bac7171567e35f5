"""Pure formatting core: metadata records, rounding, grouping and display."""
