"""
Pipeline Module for the Knowledge Scoper

Input loading and rendering/export of parse results for the CLI.
"""

__all__ = []
