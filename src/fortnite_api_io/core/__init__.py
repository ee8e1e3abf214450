"""Core package: configuration, error codes and the client error hierarchy."""
