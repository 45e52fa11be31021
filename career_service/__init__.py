"""Career coach HTTP service."""
