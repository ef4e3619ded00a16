"""Core configuration, logging and error handling shared by both services."""
