"""Collaborator availability and booking-conflict service for the salon agenda."""
