"""Game primitives consumed by the search: cards, grid, scoring."""
