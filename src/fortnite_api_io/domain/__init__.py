"""Domain layer: enums, value objects and protocols shared by all API versions."""
