"""
Overview API client

A fluent Python client for the Overview document-analysis API: document
sets, documents and the plugin key-value store.
"""

__version__ = "0.1.0"
