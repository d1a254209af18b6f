"""Domain layer: value types, mention model, protocols and events."""
