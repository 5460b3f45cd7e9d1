"""
Translate Flow type annotations into TypeScript type annotations.
"""
