"""
CLI runner module.

Provides commands:
- ids / documents / document: Query a document set
- state / set-state: Read and replace the store state
- objects / object / create-object / update-object: Work with store objects
- init-config: Write a default config file
"""

from .main import create_cli, main

__all__ = [
    "create_cli",
    "main",
]
