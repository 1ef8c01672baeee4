"""Test suite for bwcurve.

Test Structure:
- unit/: Unit tests mirroring packages/bwcurve/core
  - curves/: Curve model, document and transform pipeline tests
  - formats/bitwig/: .bwcurve encoder, decoder and byte primitive tests
  - config/: Configuration loading tests
  - utils/: Logging and math utility tests
- conftest.py: Shared document fixtures
"""
