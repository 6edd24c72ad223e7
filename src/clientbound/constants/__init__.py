"""Static constants shared across clientbound modules."""
