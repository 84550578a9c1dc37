"""
Gateway API Endpoints

This package contains the FastAPI routers for the gateway:
- submit: Diagnostic form submission (POST /api/submit)
"""
