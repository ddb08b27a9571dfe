"""
Syntax tree node definitions for lpl.

No parser builds these yet. They fix the shape the parser will produce
from the normalized token stream: one statement per line, with nested
bodies delimited by INDENT/UNINDENT.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    BINDING = "Binding"
    DEF = "Def"
    COPY = "Copy"
    NAME = "Name"


class ASTNode(ABC):
    """Base class for all AST nodes."""
    
    node_type: ASTNodeType
    
    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass


@dataclass
class Name(ASTNode):
    """A reference to a bound name."""
    name: str
    node_type = ASTNodeType.NAME
    
    def children(self) -> List[ASTNode]:
        return []


@dataclass
class Binding(ASTNode):
    """``name: value`` binds the value of an expression to a name."""
    name: str
    value: ASTNode
    node_type = ASTNodeType.BINDING
    
    def children(self) -> List[ASTNode]:
        return [self.value]


@dataclass
class Def(ASTNode):
    """A definition taking parameters, with an indented body of statements."""
    params: List[str] = field(default_factory=list)
    body: List[ASTNode] = field(default_factory=list)
    node_type = ASTNodeType.DEF
    
    def children(self) -> List[ASTNode]:
        return list(self.body)


@dataclass
class Copy(ASTNode):
    """Copies ``target`` through one of its methods, called with ``args``."""
    target: ASTNode
    method: str
    args: List[ASTNode] = field(default_factory=list)
    node_type = ASTNodeType.COPY
    
    def children(self) -> List[ASTNode]:
        return [self.target] + list(self.args)
