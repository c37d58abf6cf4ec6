"""Configuration for teamdeck: constants and persisted UI preferences."""
