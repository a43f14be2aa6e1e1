#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared helpers: encoding detection, text utilities, HTML safety and output writing."""
