"""
repositories/ - Record Store
============================
One repository per table (`job`, `person`). Each method is a single SQL
round-trip that returns model objects and raises the shared error taxonomy.
"""
