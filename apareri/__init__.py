"""APARERI studio: styling calculators and the pinned-looks board."""
