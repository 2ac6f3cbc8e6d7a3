"""Query building, table flattening and shared helpers."""
