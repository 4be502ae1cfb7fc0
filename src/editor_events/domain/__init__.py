"""Domain layer: event vocabulary, listener contract and exceptions."""
