"""Read-only access to SBML models carrying fbc gene-product associations.

The SBML document is parsed with libsbml and copied into small immutable
records so that the import code never touches libsbml objects directly.
"""

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from .gpr_utils import Association, GeneLeaf, Operator, OperatorKind, UnsupportedAssociationShapeError

logger = logging.getLogger(__name__)


class SbmlReadError(ValueError):
    """Raised when libsbml cannot produce a usable model from a document."""


@dataclass(frozen=True)
class SpeciesRef:
    species: str
    stoichiometry: float = 1.0


@dataclass(frozen=True)
class GeneProduct:
    id: str
    label: str
    name: str


@dataclass(frozen=True)
class ForeignReaction:
    id: str
    name: str
    reversible: bool
    reactants: Tuple[SpeciesRef, ...] = ()
    products: Tuple[SpeciesRef, ...] = ()
    association: Optional[Association] = None


@dataclass
class ForeignModel:
    """An SBML model reduced to the parts needed for a map import."""

    id: str = ""
    reactions: Tuple[ForeignReaction, ...] = ()
    gene_products: Dict[str, GeneProduct] = field(default_factory=dict)

    def reaction_count(self) -> int:
        return len(self.reactions)

    def reaction(self, index: int) -> ForeignReaction:
        return self.reactions[index]

    def gene_product(self, gene_id: str) -> Optional[GeneProduct]:
        return self.gene_products.get(gene_id)


def load_sbml_model(sbml_path: Union[str, Path]) -> ForeignModel:
    """Load an SBML file into a ForeignModel.

    Args:
        sbml_path: Path to the SBML document

    Returns:
        ForeignModel

    Raises:
        FileNotFoundError: If the file does not exist
        SbmlReadError: If libsbml reports errors or the document has no model
    """
    import libsbml

    p = Path(sbml_path)
    if not p.exists():
        raise FileNotFoundError(f"SBML file not found: {p}")
    logger.info("Reading SBML model from %s.", p)
    doc = libsbml.readSBMLFromFile(str(p))
    return _convert_document(doc, str(p))


def read_sbml_string(text: str) -> ForeignModel:
    """Parse an SBML document held in a string into a ForeignModel."""
    import libsbml

    doc = libsbml.readSBMLFromString(text)
    return _convert_document(doc, "<string>")


def _convert_document(doc, source: str) -> ForeignModel:
    import libsbml

    problems = []
    for i in range(doc.getNumErrors()):
        err = doc.getError(i)
        if err.getSeverity() >= libsbml.LIBSBML_SEV_ERROR:
            problems.append(f"line {err.getLine()}: {err.getMessage().strip()}")
        else:
            logger.debug("libsbml warning in %s: %s", source, err.getMessage().strip())
    if problems:
        raise SbmlReadError(f"Invalid SBML document {source}: " + "; ".join(problems))

    model = doc.getModel()
    if model is None:
        raise SbmlReadError(f"SBML document {source} does not contain a model")

    gene_products = {}
    fbc_model = model.getPlugin("fbc")
    if fbc_model is not None:
        for gp in fbc_model.getListOfGeneProducts():
            gene_products[gp.getId()] = GeneProduct(
                id=gp.getId(), label=gp.getLabel(), name=gp.getName()
            )
    else:
        logger.warning("SBML model %s has no fbc package; no gene rules will be imported", source)

    reactions = []
    for i in range(model.getNumReactions()):
        reactions.append(_convert_reaction(model.getReaction(i)))

    logger.info(
        "SBML model %s has %d reactions and %d gene products.",
        model.getId(), len(reactions), len(gene_products),
    )
    return ForeignModel(id=model.getId(), reactions=tuple(reactions), gene_products=gene_products)


def _convert_reaction(rxn) -> ForeignReaction:
    association = None
    fbc_rxn = rxn.getPlugin("fbc")
    if fbc_rxn is not None and fbc_rxn.isSetGeneProductAssociation():
        gpa = fbc_rxn.getGeneProductAssociation()
        if gpa.isSetAssociation():
            try:
                association = convert_association(gpa.getAssociation())
            except UnsupportedAssociationShapeError as e:
                raise UnsupportedAssociationShapeError(
                    e.node, f"Reaction {rxn.getId()}: {e}"
                ) from e
    return ForeignReaction(
        id=rxn.getId(),
        name=rxn.getName(),
        reversible=rxn.getReversible(),
        reactants=tuple(_species_ref(x, rxn.getId()) for x in rxn.getListOfReactants()),
        products=tuple(_species_ref(x, rxn.getId()) for x in rxn.getListOfProducts()),
        association=association,
    )


def _species_ref(sr, reaction_id: str) -> SpeciesRef:
    stoich = sr.getStoichiometry()
    if not sr.isSetStoichiometry() or math.isnan(stoich):
        logger.warning(
            "Species %s in reaction %s has no stoichiometry; assuming 1.",
            sr.getSpecies(), reaction_id,
        )
        stoich = 1.0
    return SpeciesRef(species=sr.getSpecies(), stoichiometry=stoich)


def convert_association(ass) -> Association:
    """Convert a libsbml FbcAssociation into a GeneLeaf/Operator tree."""
    if ass.isGeneProductRef():
        return GeneLeaf(ass.getGeneProduct())
    if ass.isFbcAnd():
        kind = OperatorKind.AND
    elif ass.isFbcOr():
        kind = OperatorKind.OR
    else:
        raise UnsupportedAssociationShapeError(ass.getElementName())
    children = tuple(convert_association(child) for child in ass.getListOfAssociations())
    return Operator(kind, children)
