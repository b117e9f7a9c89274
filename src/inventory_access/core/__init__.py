"""Core building blocks: exceptions and identifier value objects."""
