"""Core cross-cutting concerns."""
