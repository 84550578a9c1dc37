"""
Gateway Models
==============

Pydantic request, response and verdict models.
"""
