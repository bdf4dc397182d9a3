"""Domain layer: models, step sequencing and valuation."""
