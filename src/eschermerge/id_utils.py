"""Identifier helpers for SBML models that follow the Argonne naming convention.

Each SBML id is a type prefix ("R_", "M_", "G_") followed by the BiGG id. The
prefix is stripped for anything shown in the map, but gene-product table
lookups must use the id exactly as it appears in the SBML document.
"""

REACTION_PREFIX = "R_"
METABOLITE_PREFIX = "M_"
GENE_PREFIX = "G_"


def normalize_for_display(identifier: str, prefix: str) -> str:
    """Remove a leading type prefix from an SBML identifier.

    Args:
        identifier: SBML identifier (e.g. "R_PGI")
        prefix: Type prefix to remove (e.g. "R_")

    Returns:
        The identifier without the prefix, or unchanged if it does not start with it
    """
    if prefix and identifier.startswith(prefix):
        return identifier[len(prefix):]
    return identifier


def lookup_key(identifier: str) -> str:
    """Return the key used to look up an SBML gene product.

    The fbc gene-product table is keyed by the original SBML id, so this never
    strips anything.
    """
    return identifier
