"""Core types for courier: formats, errors and path resolution."""
