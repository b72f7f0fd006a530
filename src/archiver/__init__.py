"""
Document Archiver

Maintenance utility that scans a tree of generated document folders, picks
files created before a cutoff month and packs them into dated zip archives
per folder.
"""

__version__ = "1.0.0"
