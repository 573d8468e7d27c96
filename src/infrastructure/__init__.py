"""Infrastructure layer - implementations of the domain ports."""
