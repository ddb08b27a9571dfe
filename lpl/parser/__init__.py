"""
lpl Parser Package

Only the syntax tree contract lives here for now; the parser that builds
it from ``lpl.lex_source`` output is not written yet.
"""

from .ast_nodes import ASTNode, ASTNodeType, Binding, Def, Copy, Name

__all__ = [
    "ASTNode", "ASTNodeType",
    "Binding", "Def", "Copy", "Name",
]
