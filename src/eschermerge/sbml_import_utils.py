"""Import of SBML reactions into an Escher metabolic map."""

from typing import Any, Callable, List

import pandas as pd

from .escher_map_utils import EscherMetaModel, MapReaction
from .gpr_utils import UnsupportedAssociationShapeError, translate_association
from .id_utils import lookup_key, normalize_for_display
from .sbml_utils import ForeignModel, ForeignReaction, SpeciesRef
from .shared_env_utils import SharedEnvUtils


class MalformedForeignModelError(ValueError):
    """Raised when a gene association refers to a gene product the SBML model lacks."""

    def __init__(self, reaction_id: str, gene_id: str) -> None:
        self.reaction_id = reaction_id
        self.gene_id = gene_id
        super().__init__(
            f"Reaction {reaction_id} references gene product {gene_id}, "
            "which is not defined in the SBML model"
        )


class SbmlImportUtils(SharedEnvUtils):
    """Adds the reactions of an SBML model to an Escher map.

    Only reaction data is imported: name, reversibility, gene rule, gene
    aliases and stoichiometry. No nodes or segments are created, which is
    good enough for pathway analysis.

    The SBML model must use Argonne naming conventions: each ID is a type
    prefix ("R_", "M_", "G_") plus the BiGG ID. The prefixes can be changed
    under the "sbml" section of the configuration file.

    A new reaction is built completely before the map is touched, so a
    failure never leaves a half-built reaction in the map. Reactions added
    earlier in a failed pass stay in the map; discard the map on error.
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        prefixes = self.const_sbml_prefixes()
        self.reaction_prefix = self.get_config_value("sbml.reaction_prefix", prefixes["reaction"])
        self.metabolite_prefix = self.get_config_value("sbml.metabolite_prefix", prefixes["metabolite"])
        self.gene_prefix = self.get_config_value("sbml.gene_prefix", prefixes["gene"])
        self.last_imported: List[MapReaction] = []

    def import_sbml(self, host_map: EscherMetaModel, foreign_model: ForeignModel) -> int:
        """Add every SBML reaction not already in the map.

        Args:
            host_map: Map to extend in place
            foreign_model: SBML model to import

        Returns:
            Number of new reactions added

        Raises:
            MalformedForeignModelError: If a gene rule names an undefined gene product
            UnsupportedAssociationShapeError: If a gene rule has an unknown node type
        """
        self.initialize_call(
            "import_sbml", {"map": str(host_map), "sbml_model": foreign_model.id}
        )
        self.last_imported = []
        alias_map = host_map.base_alias_map()
        new_reaction_count = 0
        for i in range(foreign_model.reaction_count()):
            foreign_reaction = foreign_model.reaction(i)
            bigg_id = normalize_for_display(foreign_reaction.id, self.reaction_prefix)
            if host_map.has_reaction(bigg_id):
                self.log_debug(f"Reaction {bigg_id} is already in the map.")
                continue
            reaction = self.build_reaction(foreign_model, foreign_reaction, host_map.next_id)
            for reactant in foreign_reaction.reactants:
                self.add_stoich(reaction, reactant, -1)
            for product in foreign_reaction.products:
                self.add_stoich(reaction, product, 1)
            host_map.connect_reaction(alias_map, reaction)
            host_map.put_reaction(bigg_id, reaction)
            self.last_imported.append(reaction)
            self.obj_created.append(bigg_id)
            new_reaction_count += 1
        self.log_info(f"{new_reaction_count} new reactions found.")
        return new_reaction_count

    def build_reaction(
        self,
        foreign_model: ForeignModel,
        foreign_reaction: ForeignReaction,
        next_id: Callable[[], int],
    ) -> MapReaction:
        """Create a map reaction from an SBML reaction, without stoichiometry.

        Args:
            foreign_model: SBML model holding the gene-product table
            foreign_reaction: Reaction to convert
            next_id: Function allocating a new map element ID

        Returns:
            MapReaction with rule and gene aliases set
        """
        bigg_id = normalize_for_display(foreign_reaction.id, self.reaction_prefix)
        reaction = MapReaction(next_id(), bigg_id, foreign_reaction.name)
        reaction.reversible = foreign_reaction.reversible
        genes = set()
        if foreign_reaction.association is not None:
            try:
                reaction.rule, genes = translate_association(
                    foreign_reaction.association, self.gene_prefix
                )
            except UnsupportedAssociationShapeError as e:
                self.log_error(f"Cannot translate gene rule of reaction {foreign_reaction.id}: {e}")
                raise UnsupportedAssociationShapeError(
                    e.node, f"Reaction {foreign_reaction.id}: {e}"
                ) from e
        for gene_id in sorted(genes):
            product = foreign_model.gene_product(lookup_key(gene_id))
            if product is None:
                self.log_error(
                    f"Gene product {gene_id} used by reaction {foreign_reaction.id} is not defined."
                )
                raise MalformedForeignModelError(foreign_reaction.id, gene_id)
            reaction.add_alias(product.label, product.name)
        return reaction

    def add_stoich(self, reaction: MapReaction, species_ref: SpeciesRef, sign: int) -> None:
        """Add an SBML species reference to a reaction's stoichiometry.

        Args:
            reaction: Reaction to update
            species_ref: Source SBML species reference
            sign: 1 for a product, -1 for a reactant
        """
        metabolite = normalize_for_display(species_ref.species, self.metabolite_prefix)
        coeff = int(species_ref.stoichiometry) * sign
        reaction.add_stoich(coeff, metabolite)

    def import_report(self) -> pd.DataFrame:
        """Summarize the reactions added by the last import as a table."""
        rows = []
        for reaction in self.last_imported:
            rows.append({
                "id": reaction.id,
                "bigg_id": reaction.bigg_id,
                "name": reaction.name,
                "reversible": reaction.reversible,
                "rule": reaction.rule or "",
                "genes": ", ".join(f"{k}:{v}" for k, v in sorted(reaction.genes.items())),
                "stoichiometry": " ".join(
                    f"{v:+d} {k}" for k, v in reaction.metabolites.items()
                ),
            })
        return pd.DataFrame(
            rows,
            columns=["id", "bigg_id", "name", "reversible", "rule", "genes", "stoichiometry"],
        )
