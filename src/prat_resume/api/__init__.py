"""HTTP action surface for the resume editor."""
