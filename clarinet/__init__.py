"""Contract scaffolding, manifest editing and Stacks/Bitcoin block standardization."""

__version__ = "0.1.0"