"""eschermerge - Extend Escher metabolic maps with reactions from SBML models."""

from .base_utils import BaseUtils
from .shared_env_utils import SharedEnvUtils
from .id_utils import lookup_key, normalize_for_display
from .gpr_utils import (
    GeneLeaf,
    Operator,
    OperatorKind,
    UnsupportedAssociationShapeError,
    translate_association,
)
from .sbml_utils import (
    ForeignModel,
    ForeignReaction,
    GeneProduct,
    SbmlReadError,
    SpeciesRef,
    load_sbml_model,
    read_sbml_string,
)
from .genome_utils import BaseGenome
from .escher_map_utils import EscherMetaModel, MapReaction
from .sbml_import_utils import MalformedForeignModelError, SbmlImportUtils

__all__ = [
    "BaseGenome",
    "BaseUtils",
    "EscherMetaModel",
    "ForeignModel",
    "ForeignReaction",
    "GeneLeaf",
    "GeneProduct",
    "MalformedForeignModelError",
    "MapReaction",
    "Operator",
    "OperatorKind",
    "SbmlImportUtils",
    "SbmlReadError",
    "SharedEnvUtils",
    "SpeciesRef",
    "UnsupportedAssociationShapeError",
    "load_sbml_model",
    "lookup_key",
    "normalize_for_display",
    "read_sbml_string",
    "translate_association",
]

__version__ = "0.1.0"
