"""Tests for the Escher map model."""

import json

import pytest

from eschermerge.escher_map_utils import EscherMetaModel, MapReaction


class TestEscherMetaModel:
    """Test suite for EscherMetaModel."""

    def test_loads_reactions(self, host_map):
        assert host_map.reaction_count() == 1
        pgi = host_map.get_reaction("PGI")
        assert pgi.id == 10
        assert pgi.rule == "b4025"
        assert pgi.genes == {"b4025": "pgi"}
        assert pgi.reversible is True

    def test_existing_reactions_are_wired(self, host_map):
        assert host_map.reactions_for_feature("fig|83333.1.peg.4025") == {"PGI"}
        # Reversible, so PGI both produces and consumes its metabolites
        assert host_map.producers_of("g6p_c") == {"PGI"}
        assert host_map.consumers_of("f6p_c") == {"PGI"}

    def test_next_id_is_monotonic(self, host_map):
        assert host_map.next_id() == 21
        assert host_map.next_id() == 22

    def test_independent_counters(self, map_data, genome):
        first = EscherMetaModel(map_data, genome)
        second = EscherMetaModel(map_data, genome)
        first.next_id()
        first.next_id()
        assert second.next_id() == 21

    def test_put_reaction_never_overwrites(self, host_map):
        with pytest.raises(ValueError, match="already"):
            host_map.put_reaction("PGI", MapReaction(99, "PGI"))
        assert host_map.get_reaction("PGI").id == 10

    def test_duplicate_drawings(self, map_data):
        copy = dict(map_data[1]["reactions"]["10"])
        copy["segments"] = {}
        map_data[1]["reactions"]["30"] = copy
        model = EscherMetaModel(map_data)
        assert model.reaction_count() == 1
        assert model.get_reaction("PGI").id == 10
        assert model.next_id() == 31

    def test_no_genome(self, map_data):
        model = EscherMetaModel(map_data)
        assert model.base_alias_map() == {}
        assert model.feature_index == {}

    def test_rejects_bad_layout(self):
        with pytest.raises(ValueError):
            EscherMetaModel({"reactions": {}})

    def test_save_round_trip(self, host_map, map_data, temp_dir):
        reaction = MapReaction(host_map.next_id(), "FBA", "Fructose-bisphosphate aldolase")
        reaction.reversible = False
        reaction.rule = "b2097"
        reaction.add_alias("b2097", "fbaB")
        reaction.add_stoich(-1, "fdp")
        reaction.add_stoich(1, "dhap")
        host_map.put_reaction("FBA", reaction)

        out_file = f"{temp_dir}/out.json"
        host_map.save(out_file)
        with open(out_file) as f:
            saved = json.load(f)

        assert saved[0] == map_data[0]
        assert saved[1]["nodes"] == map_data[1]["nodes"]
        assert saved[1]["reactions"]["10"] == map_data[1]["reactions"]["10"]
        assert saved[1]["reactions"]["21"] == {
            "name": "Fructose-bisphosphate aldolase",
            "bigg_id": "FBA",
            "reversibility": False,
            "label_x": 0.0,
            "label_y": 0.0,
            "gene_reaction_rule": "b2097",
            "genes": [{"bigg_id": "b2097", "name": "fbaB"}],
            "metabolites": [
                {"coefficient": -1, "bigg_id": "fdp"},
                {"coefficient": 1, "bigg_id": "dhap"},
            ],
            "segments": {},
        }

        reloaded = EscherMetaModel.load(out_file)
        assert reloaded.get_reaction("FBA").metabolites == {"fdp": -1, "dhap": 1}
        assert reloaded.next_id() == 22


class TestMapReaction:
    """Test suite for MapReaction."""

    def test_gene_tokens(self):
        reaction = MapReaction(1, "FBA")
        reaction.rule = "(b2925 or b2097)"
        reaction.add_alias("b2097", "fbaB")
        assert reaction.gene_tokens() == {"b2925", "b2097", "fbaB"}

    def test_default_name(self):
        assert MapReaction(1, "FBA").name == "FBA"
