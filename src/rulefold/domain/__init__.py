"""Domain layer — outcome type, rules, and property selectors.

This layer depends only on stdlib.
It must never import from engine, rules, or config.
"""
