"""Domain data for fleet business rules."""
