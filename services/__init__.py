"""
services/ - Business Logic Layer
================================
Validation, derived attributes and the two entity services.
Services receive their repositories through the constructor.
"""
