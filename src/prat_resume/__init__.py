"""PratResume: form-driven resume editor with live A4 preview."""
