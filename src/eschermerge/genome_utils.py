"""Base genome loading and gene alias resolution."""

import json
from pathlib import Path
from typing import Any, Dict, List, Set, Union

from .base_utils import BaseUtils


class BaseGenome(BaseUtils):
    """Genome whose features are linked to map reactions through gene aliases.

    Accepts SEED genome typed objects (GTO) and KBase Genome JSON. Feature
    aliases may be plain strings (GTO "aliases"), [source, alias] pairs
    (KBase "aliases", GTO "alias_pairs") or KBase "db_xrefs" pairs.
    """

    def __init__(self, genome_data: Dict[str, Any], **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.data = genome_data
        self.id = genome_data.get("id", "unknown")
        self.scientific_name = genome_data.get("scientific_name", "")
        self.features = {ftr["id"]: ftr for ftr in genome_data.get("features", [])}
        self._alias_to_ftr_hash = None

    def __str__(self) -> str:
        if self.scientific_name:
            return f"{self.id} ({self.scientific_name})"
        return self.id

    @classmethod
    def load(cls, filename: Union[str, Path], **kwargs: Any) -> "BaseGenome":
        """Load a genome from a GTO or KBase Genome JSON file."""
        with open(filename) as f:
            data = json.load(f)
        genome = cls(data, **kwargs)
        genome.log_info(f"Base genome {genome} loaded from {filename}.")
        return genome

    def ftr_to_aliases(self, ftrid: str) -> List[str]:
        """Returns the list of aliases for a feature"""
        ftr = self.features.get(ftrid)
        if ftr is None:
            self.log_warning(f"Feature {ftrid} not found in genome {self.id}")
            return []
        aliases = []
        for alias in ftr.get("aliases", []):
            aliases.append(alias if isinstance(alias, str) else alias[1])
        for key in ("alias_pairs", "db_xrefs"):
            for alias in ftr.get(key, []):
                aliases.append(alias[1])
        return aliases

    def alias_map(self) -> Dict[str, Set[str]]:
        """Returns a hash of alias to the set of feature IDs that carry it"""
        if self._alias_to_ftr_hash is None:
            self._alias_to_ftr_hash = {}
            for ftrid in self.features:
                self._alias_to_ftr_hash.setdefault(ftrid, set()).add(ftrid)
                for alias in self.ftr_to_aliases(ftrid):
                    self._alias_to_ftr_hash.setdefault(alias, set()).add(ftrid)
        return self._alias_to_ftr_hash

    def alias_to_ftrs(self, alias: str) -> Set[str]:
        """Returns the set of features that match the input alias"""
        return self.alias_map().get(alias, set())
