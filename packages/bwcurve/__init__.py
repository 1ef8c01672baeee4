"""bwcurve: build, transform and serialize .bwcurve curve documents."""

__version__ = "0.1.0"
