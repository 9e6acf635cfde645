"""Configuration layer — section models, discovery, settings, logging."""
