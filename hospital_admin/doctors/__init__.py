"""Doctor records: CRUD with unique license numbers."""
