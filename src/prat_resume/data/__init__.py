"""Database layer for PratResume."""
