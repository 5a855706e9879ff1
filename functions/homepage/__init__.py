"""
Backend package for the personal homepage API.

This package provides a FastAPI application that proxies the hitokoto quote
API, persists the message wall and records contact-form submissions in a
key-value store, with optional webhook notifications on writes.
"""
