"""
Diagnostic Intake Gateway
=========================

Single-endpoint gateway that accepts diagnostic-form submissions.

Features:
- Honeypot bot filtering (silent success)
- Disposable-domain and suspicious-TLD email filtering
- Server-side reCAPTCHA v3 score verification
- Duplicate detection backed by the database UNIQUE constraint
"""

__version__ = "1.0.0"
__author__ = "Diagnostic Intake Team"
