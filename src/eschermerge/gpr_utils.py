"""Gene-protein-reaction (GPR) association trees and their rule text.

An association is either a single gene reference (GeneLeaf) or a boolean
operator over an ordered list of sub-associations (Operator). This module
converts such a tree into the parenthesized rule strings used on Escher map
reactions, for example:
- GeneLeaf("G_b1234") -> "b1234"
- Operator(OR, [G_a, G_b]) -> "(a or b)"
- Operator(AND, [Operator(OR, [G_a, G_b]), G_c]) -> "((a or b) and c)"
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Set, Tuple, Union

from .id_utils import GENE_PREFIX, normalize_for_display


class OperatorKind(Enum):
    AND = "and"
    OR = "or"


@dataclass(frozen=True)
class GeneLeaf:
    """Reference to a single gene product by its SBML id."""

    gene_id: str


@dataclass(frozen=True)
class Operator:
    """Boolean AND/OR over child associations, in document order."""

    kind: OperatorKind
    children: Tuple["Association", ...] = ()


Association = Union[GeneLeaf, Operator]


class UnsupportedAssociationShapeError(ValueError):
    """Raised when an association node is neither a gene leaf nor an AND/OR operator."""

    def __init__(self, node: Any, message: str = None) -> None:
        self.node = node
        if message is None:
            message = f"Unsupported gene association node: {node!r}"
        super().__init__(message)


def translate_association(
    tree: Association, gene_prefix: str = GENE_PREFIX
) -> Tuple[str, Set[str]]:
    """Convert an association tree into rule text and the set of genes it uses.

    Args:
        tree: Root of the association tree
        gene_prefix: Prefix stripped from gene ids in the rule text

    Returns:
        Tuple of (rule_text, genes_used) where genes_used holds the original
        SBML gene ids

    Raises:
        UnsupportedAssociationShapeError: If a node has an unknown type or operator
    """
    genes: Set[str] = set()
    rule = _translate_node(tree, genes, gene_prefix)
    return rule, genes


def _translate_node(node: Association, genes: Set[str], gene_prefix: str) -> str:
    if isinstance(node, GeneLeaf):
        genes.add(node.gene_id)
        return normalize_for_display(node.gene_id, gene_prefix)
    if isinstance(node, Operator):
        if node.kind is OperatorKind.AND:
            joiner = " and "
        elif node.kind is OperatorKind.OR:
            joiner = " or "
        else:
            raise UnsupportedAssociationShapeError(
                node, f"Unsupported gene association operator: {node.kind!r}"
            )
        parts = [_translate_node(child, genes, gene_prefix) for child in node.children]
        return "(" + joiner.join(parts) + ")"
    raise UnsupportedAssociationShapeError(node)


def rule_gene_tokens(rule: str) -> Set[str]:
    """Extract the gene identifiers mentioned in a rule string.

    Args:
        rule: GPR rule text such as "((a or b) and c)"

    Returns:
        Set of gene tokens (operators and parentheses removed)
    """
    if not rule or not rule.strip():
        return set()
    tokens = re.split(r"[()\s]+", rule)
    return {t for t in tokens if t and t.lower() not in ("and", "or")}
