"""Shared test utilities and fixtures for the eschermerge test suite.

This module provides common fixtures for building small Escher maps,
genomes and SBML-derived models without touching real data files.
"""

import json
import logging
import shutil
import sys
import tempfile
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from eschermerge.escher_map_utils import EscherMetaModel
from eschermerge.genome_utils import BaseGenome
from eschermerge.gpr_utils import GeneLeaf
from eschermerge.sbml_utils import ForeignModel, ForeignReaction, GeneProduct, SpeciesRef


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files that gets cleaned up automatically."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir)


@pytest.fixture
def genome_data():
    """A tiny GTO genome with E. coli style aliases."""
    return {
        "id": "83333.1",
        "scientific_name": "Escherichia coli K-12",
        "features": [
            {
                "id": "fig|83333.1.peg.4025",
                "type": "CDS",
                "aliases": ["b4025", "pgi"],
            },
            {
                "id": "fig|83333.1.peg.2097",
                "type": "CDS",
                "alias_pairs": [["LocusTag", "b2097"], ["gene_name", "fbaB"]],
            },
            {
                "id": "fig|83333.1.peg.2925",
                "type": "CDS",
                "aliases": [["LocusTag", "b2925"], ["gene_name", "fbaA"]],
            },
        ],
    }


@pytest.fixture
def genome(genome_data):
    return BaseGenome(genome_data)


@pytest.fixture
def map_data():
    """An Escher map holding PGI with one segment and two metabolite nodes."""
    return [
        {"map_name": "test map", "map_id": "abc", "schema": "https://escher.github.io/escher/jsonschema/1-0-0#"},
        {
            "reactions": {
                "10": {
                    "name": "Glucose-6-phosphate isomerase",
                    "bigg_id": "PGI",
                    "reversibility": True,
                    "label_x": 100.0,
                    "label_y": 200.0,
                    "gene_reaction_rule": "b4025",
                    "genes": [{"bigg_id": "b4025", "name": "pgi"}],
                    "metabolites": [
                        {"coefficient": -1, "bigg_id": "g6p_c"},
                        {"coefficient": 1, "bigg_id": "f6p_c"},
                    ],
                    "segments": {
                        "11": {"from_node_id": "12", "to_node_id": "13", "b1": None, "b2": None},
                    },
                },
            },
            "nodes": {
                "12": {"node_type": "metabolite", "x": 0.0, "y": 0.0, "bigg_id": "g6p_c", "name": "G6P"},
                "13": {"node_type": "metabolite", "x": 0.0, "y": 50.0, "bigg_id": "f6p_c", "name": "F6P"},
            },
            "text_labels": {"20": {"text": "Glycolysis", "x": 5.0, "y": 5.0}},
            "canvas": {"x": 0.0, "y": 0.0, "width": 500.0, "height": 500.0},
        },
    ]


@pytest.fixture
def host_map(map_data, genome):
    return EscherMetaModel(map_data, genome)


@pytest.fixture
def foreign_model():
    """SBML-derived model with a duplicate (PGI) and a new reaction (FBA)."""
    return ForeignModel(
        id="iTest",
        reactions=(
            ForeignReaction(
                id="R_PGI",
                name="Glucose-6-phosphate isomerase",
                reversible=True,
                reactants=(SpeciesRef("M_g6p_c", 1.0),),
                products=(SpeciesRef("M_f6p_c", 1.0),),
                association=GeneLeaf("G_b4025"),
            ),
            ForeignReaction(
                id="R_FBA",
                name="Fructose-bisphosphate aldolase",
                reversible=False,
                reactants=(SpeciesRef("M_fdp", 1.0),),
                products=(SpeciesRef("M_dhap", 1.0), SpeciesRef("M_g3p", 1.0)),
                association=GeneLeaf("G_b2097"),
            ),
        ),
        gene_products={
            "G_b4025": GeneProduct("G_b4025", "b4025", "pgi"),
            "G_b2097": GeneProduct("G_b2097", "b2097", "fbaB"),
            "G_b2925": GeneProduct("G_b2925", "b2925", "fbaA"),
        },
    )


@pytest.fixture
def write_json(temp_dir):
    """Return a helper that writes an object as JSON into the temp directory."""

    def _write(name, data):
        path = Path(temp_dir) / name
        path.write_text(json.dumps(data))
        return path

    return _write


# Configure logging for tests
@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for all tests."""
    logging.basicConfig(level=logging.DEBUG, force=True)
    yield
    # Reset logging after tests
    logging.getLogger().handlers.clear()


# Marker for slow tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark test as integration test")
