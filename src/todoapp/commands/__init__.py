"""Command modules for todoapp."""
