"""Edge Match: an edge-matching tile puzzle solver."""
