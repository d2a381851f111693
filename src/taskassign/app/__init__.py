"""FastAPI application for the task assignment service."""
