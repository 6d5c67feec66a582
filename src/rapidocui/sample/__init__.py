"""Sample application demonstrating the RapiDoc settings."""
