"""
Gateway Utilities
================

Core utilities for:
- email_filters.py: Email shape check and disposable/TLD block-lists
- captcha.py: Server-side reCAPTCHA v3 verification
"""
