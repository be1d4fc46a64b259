"""
utils/ - Shared Helpers
=======================
Logging setup, the error taxonomy and text formatting used by every layer.
"""
