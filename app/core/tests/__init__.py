"""
Tests for core app.

This package contains test modules for:
- test_exceptions.py: Application error hierarchy tests
- test_views.py: Health check endpoint tests

Usage:
    pytest core/tests/
"""
