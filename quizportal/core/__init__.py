"""Core layer: configuration, shared schemas, interfaces and exceptions."""
