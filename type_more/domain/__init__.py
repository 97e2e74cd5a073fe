"""Domain layer: validated value objects and the ports they depend on."""
