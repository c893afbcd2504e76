"""Personal portfolio page built with Reflex."""
