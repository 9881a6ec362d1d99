#!/usr/bin/env python
"""Example script demonstrating an SBML import into an Escher map.

Builds a one-reaction map and a two-reaction SBML-style model in memory,
imports the model, and prints what was added. With real files, use

    eschermerge import map.json genome.gto model.xml enriched_map.json
"""

import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from eschermerge import (
    EscherMetaModel,
    ForeignModel,
    ForeignReaction,
    GeneLeaf,
    GeneProduct,
    SbmlImportUtils,
    SpeciesRef,
)


def main():
    """Demonstrate importing SBML reactions into a map."""
    escher_map = EscherMetaModel([
        {"map_name": "example"},
        {
            "reactions": {
                "1": {"bigg_id": "PGI", "name": "Glucose-6-phosphate isomerase",
                      "reversibility": True, "gene_reaction_rule": "b4025",
                      "genes": [{"bigg_id": "b4025", "name": "pgi"}],
                      "metabolites": [{"coefficient": -1, "bigg_id": "g6p_c"},
                                      {"coefficient": 1, "bigg_id": "f6p_c"}],
                      "segments": {}},
            },
            "nodes": {},
        },
    ])
    sbml_model = ForeignModel(
        id="example",
        reactions=(
            ForeignReaction("R_PGI", "Glucose-6-phosphate isomerase", True,
                            (SpeciesRef("M_g6p_c"),), (SpeciesRef("M_f6p_c"),),
                            GeneLeaf("G_b4025")),
            ForeignReaction("R_FBA", "Fructose-bisphosphate aldolase", False,
                            (SpeciesRef("M_fdp_c"),),
                            (SpeciesRef("M_dhap_c"), SpeciesRef("M_g3p_c")),
                            GeneLeaf("G_b2097")),
        ),
        gene_products={
            "G_b4025": GeneProduct("G_b4025", "b4025", "pgi"),
            "G_b2097": GeneProduct("G_b2097", "b2097", "fbaB"),
        },
    )

    util = SbmlImportUtils()
    count = util.import_sbml(escher_map, sbml_model)

    print("=" * 80)
    print(f"{count} reaction(s) added; map now has {escher_map.reaction_count()}.")
    print("=" * 80)
    print(util.import_report().to_string(index=False))


if __name__ == "__main__":
    main()
