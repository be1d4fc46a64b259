"""
console/ - Interactive Console
==============================
Terminal menus for the person and job tables.
"""
