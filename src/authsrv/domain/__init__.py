"""Domain layer: account projections, repository contracts, exceptions."""
