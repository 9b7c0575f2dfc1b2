"""Qt user interface for isomap."""
