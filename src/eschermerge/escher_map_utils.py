"""Escher map model with reaction registry and gene/metabolite network indices."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Union

from .base_utils import BaseUtils
from .genome_utils import BaseGenome
from .gpr_utils import rule_gene_tokens

ESCHER_REACTION_KEYS = (
    "name", "bigg_id", "reversibility", "label_x", "label_y",
    "gene_reaction_rule", "genes", "metabolites", "segments",
)


class MapReaction:
    """A reaction on an Escher map.

    Args:
        id: Numeric map identifier (unique across all map elements)
        bigg_id: BiGG identifier, the registry key
        name: Display name
    """

    def __init__(self, id: int, bigg_id: str, name: str = "") -> None:
        self.id = id
        self.bigg_id = bigg_id
        self.name = name or bigg_id
        self.reversible = True
        self.rule: Optional[str] = None
        self.genes: Dict[str, str] = {}
        self.metabolites: Dict[str, float] = {}
        # Layout carried through unchanged; imported reactions have none
        self.label_x = 0.0
        self.label_y = 0.0
        self.segments: Dict[str, Any] = {}
        # Escher fields this class does not model, written back unchanged
        self.extra: Dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"MapReaction({self.id}, {self.bigg_id!r})"

    def add_alias(self, label: str, name: str) -> None:
        """Record the display name for a gene used by this reaction."""
        self.genes[label] = name

    def add_stoich(self, coeff: int, metabolite: str) -> None:
        """Add a stoichiometric contribution; repeated metabolites are summed."""
        self.metabolites[metabolite] = self.metabolites.get(metabolite, 0) + coeff

    def gene_tokens(self) -> Set[str]:
        """All gene identifiers this reaction refers to, in the rule or as aliases."""
        tokens = rule_gene_tokens(self.rule)
        tokens.update(self.genes.keys())
        tokens.update(name for name in self.genes.values() if name)
        return tokens

    @classmethod
    def from_escher(cls, rid: str, entry: Dict[str, Any]) -> "MapReaction":
        reaction = cls(int(rid), entry["bigg_id"], entry.get("name", ""))
        reaction.reversible = bool(entry.get("reversibility", True))
        reaction.rule = entry.get("gene_reaction_rule") or None
        for gene in entry.get("genes", []):
            reaction.genes[gene["bigg_id"]] = gene.get("name", "")
        for met in entry.get("metabolites", []):
            reaction.add_stoich(met["coefficient"], met["bigg_id"])
        reaction.label_x = entry.get("label_x", 0.0)
        reaction.label_y = entry.get("label_y", 0.0)
        reaction.segments = entry.get("segments", {})
        reaction.extra = {k: v for k, v in entry.items() if k not in ESCHER_REACTION_KEYS}
        return reaction

    def to_escher(self) -> Dict[str, Any]:
        return {
            **self.extra,
            "name": self.name,
            "bigg_id": self.bigg_id,
            "reversibility": self.reversible,
            "label_x": self.label_x,
            "label_y": self.label_y,
            "gene_reaction_rule": self.rule or "",
            "genes": [{"bigg_id": k, "name": v} for k, v in self.genes.items()],
            "metabolites": [
                {"coefficient": v, "bigg_id": k} for k, v in self.metabolites.items()
            ],
            "segments": self.segments,
        }


class EscherMetaModel(BaseUtils):
    """Metabolic model built from an Escher map and linked to a base genome.

    Reactions are registered by BiGG id. Maps sometimes draw the same reaction
    more than once; only the first drawing is registered, the others are kept
    so that they are written back on save.
    """

    def __init__(
        self,
        map_data: List[Dict[str, Any]],
        genome: Optional[BaseGenome] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        if not isinstance(map_data, list) or len(map_data) != 2:
            raise ValueError("Escher map must be a two-element list [header, body]")
        self.header = map_data[0]
        self.body = map_data[1]
        self.genome = genome
        self.reactions: Dict[str, MapReaction] = {}
        self._drawn_reactions: Dict[str, MapReaction] = {}
        self._max_id = 0
        # feature ID -> BiGG IDs of reactions it triggers
        self.feature_index: Dict[str, Set[str]] = {}
        # metabolite BiGG ID -> BiGG IDs of reactions producing / consuming it
        self.producers: Dict[str, Set[str]] = {}
        self.consumers: Dict[str, Set[str]] = {}

        for rid, entry in self.body.get("reactions", {}).items():
            reaction = MapReaction.from_escher(rid, entry)
            self._drawn_reactions[rid] = reaction
            self._note_id(rid)
            for sid in reaction.segments:
                self._note_id(sid)
            if reaction.bigg_id in self.reactions:
                self.log_debug(f"Reaction {reaction.bigg_id} is drawn more than once.")
                continue
            self.reactions[reaction.bigg_id] = reaction
        for key in ("nodes", "text_labels"):
            for eid in self.body.get(key, {}):
                self._note_id(eid)

        alias_map = self.base_alias_map()
        for reaction in self.reactions.values():
            self.connect_reaction(alias_map, reaction)

    def __str__(self) -> str:
        return self.header.get("map_name", "Escher map")

    @classmethod
    def load(
        cls, filename: Union[str, Path], genome: Optional[BaseGenome] = None, **kwargs: Any
    ) -> "EscherMetaModel":
        """Load an Escher map JSON file."""
        with open(filename) as f:
            map_data = json.load(f)
        model = cls(map_data, genome, **kwargs)
        model.log_info(f"{len(model.reactions)} reactions loaded from map {filename}.")
        return model

    def save(self, filename: Union[str, Path]) -> None:
        """Write the map, including imported reactions, as Escher JSON."""
        body = dict(self.body)
        body["reactions"] = {
            rid: reaction.to_escher() for rid, reaction in self._drawn_reactions.items()
        }
        with open(filename, "w") as f:
            json.dump([self.header, body], f, indent=2)
        self.log_info(f"Map with {len(self.reactions)} reactions written to {filename}.")

    def _note_id(self, element_id: str) -> None:
        try:
            value = int(element_id)
        except (TypeError, ValueError):
            return
        if value > self._max_id:
            self._max_id = value

    def next_id(self) -> int:
        """Allocate a new map element ID. IDs are never reused."""
        self._max_id += 1
        return self._max_id

    def has_reaction(self, bigg_id: str) -> bool:
        return bigg_id in self.reactions

    def get_reaction(self, bigg_id: str) -> Optional[MapReaction]:
        return self.reactions.get(bigg_id)

    def reaction_count(self) -> int:
        return len(self.reactions)

    def put_reaction(self, bigg_id: str, reaction: MapReaction) -> None:
        """Register a new reaction. Existing reactions are never replaced."""
        if bigg_id in self.reactions:
            raise ValueError(f"Reaction {bigg_id} is already in map {self}")
        self.reactions[bigg_id] = reaction
        self._drawn_reactions[str(reaction.id)] = reaction

    def base_alias_map(self) -> Dict[str, Set[str]]:
        """Alias map of the base genome, or an empty map if there is no genome."""
        if self.genome is None:
            return {}
        return self.genome.alias_map()

    def connect_reaction(self, alias_map: Dict[str, Set[str]], reaction: MapReaction) -> Set[str]:
        """Link a reaction to the features that trigger it and to its metabolites.

        Args:
            alias_map: Mapping of gene alias to feature IDs
            reaction: Fully populated reaction

        Returns:
            Set of feature IDs linked to the reaction
        """
        fids = set()
        for gene in reaction.gene_tokens():
            fids.update(alias_map.get(gene, ()))
        for fid in fids:
            self.feature_index.setdefault(fid, set()).add(reaction.bigg_id)
        self.create_reaction_network(reaction)
        return fids

    def create_reaction_network(self, reaction: MapReaction) -> None:
        """Add a reaction to the metabolite producer and consumer indices."""
        for metabolite, coeff in reaction.metabolites.items():
            if coeff > 0 or (coeff < 0 and reaction.reversible):
                self.producers.setdefault(metabolite, set()).add(reaction.bigg_id)
            if coeff < 0 or (coeff > 0 and reaction.reversible):
                self.consumers.setdefault(metabolite, set()).add(reaction.bigg_id)

    def reactions_for_feature(self, fid: str) -> Set[str]:
        return self.feature_index.get(fid, set())

    def producers_of(self, metabolite: str) -> Set[str]:
        return self.producers.get(metabolite, set())

    def consumers_of(self, metabolite: str) -> Set[str]:
        return self.consumers.get(metabolite, set())
