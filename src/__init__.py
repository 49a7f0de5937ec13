"""
Knowledge Scoper

Partitions free-form guidance/rules text into named scopes (containers) so
consumers can retrieve the guidance for one container, with unscoped lines
collected in a global scope.
"""

__version__ = "0.1.0"
