"""Company reference records."""
