"""Core building blocks: exceptions, enums, configuration and scalar types."""
