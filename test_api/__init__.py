"""
Test Suite for the flat-file authentication service

This package contains tests for:
- The JSON user store
- Request and record models
- Signup and login endpoints
- Application wiring (error rendering, health check, static files, logging)
"""
