"""Core curve model, transforms and codecs."""
