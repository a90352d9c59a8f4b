"""
Persistence adapters.

These modules encapsulate how data is stored/retrieved: one JSON file per
collection plus the directory of uploaded images. Services depend on these
adapters rather than touching the files directly.
"""
