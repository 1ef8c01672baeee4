"""File format codecs."""
