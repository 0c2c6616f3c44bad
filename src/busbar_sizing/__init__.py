"""
Busbar Sizing Engine
====================

Thermal and mechanical sizing of power busbars:
- Required cross-section with a fixed 25% safety margin
- Temperature rise from I²R losses
- Short-circuit electromagnetic force and bending stress
- Standard-size recommendations from a manufactured-size catalog
- Short-circuit transient (DC offset + 50 Hz AC) time series

Architecture:
- sizing/: calculation core (models, material table, catalog, sizer, simulator, CLI)
- api/: FastAPI boundary exposing the core over HTTP
- config, logging_config, errors: ambient configuration and error taxonomy
"""

__version__ = "1.0.0"
