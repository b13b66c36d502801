"""Core modules for Todo Service."""
