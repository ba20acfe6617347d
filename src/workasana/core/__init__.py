"""Core domain: auth, tracking and reporting."""
