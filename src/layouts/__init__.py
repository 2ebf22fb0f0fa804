"""
Layouts - template-layout inheritance for HTML trees

Resolves ``<extends src="...">`` directives by loading the referenced layout,
splicing the child's ``<block>`` overrides into it, and returning a single
flattened tree with no inheritance markers left.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
