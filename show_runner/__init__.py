"""
Show Runner - Automated Podcast Post-Production Tool

Watches a drop folder for newly uploaded episode media and transcripts,
files them under canonical episode folders, and generates show notes.
"""

__version__ = "1.0.0"
__author__ = "Show Runner Contributors"
