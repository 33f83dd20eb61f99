"""campuslife – campus calendar companion (month grid, day agenda, campus events)."""
