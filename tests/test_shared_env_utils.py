"""Tests for configuration handling."""

import os
from pathlib import Path
from unittest.mock import patch

from eschermerge.shared_env_utils import SharedEnvUtils


def test_yaml_config(temp_dir):
    config_file = Path(temp_dir) / "config.yaml"
    config_file.write_text("sbml:\n  gene_prefix: gene_\n")
    utils = SharedEnvUtils(config_file=config_file)
    assert utils.get_config_value("sbml.gene_prefix") == "gene_"
    assert utils.get_config_value("sbml.reaction_prefix", "R_") == "R_"


def test_ini_config(temp_dir):
    config_file = Path(temp_dir) / "config.ini"
    config_file.write_text("[sbml]\nmetabolite_prefix=cpd_\n")
    utils = SharedEnvUtils(config_file=config_file)
    assert utils.get_config_value("sbml.metabolite_prefix") == "cpd_"


def test_missing_explicit_config(temp_dir):
    utils = SharedEnvUtils(config_file=Path(temp_dir) / "absent.yaml")
    assert utils.get_config_value("sbml.gene_prefix", "G_") == "G_"


def test_environment_variables(temp_dir):
    env = {"ESCHERMERGE_LOG_LEVEL": "WARNING", "OTHER_VAR": "x"}
    with patch.dict(os.environ, env):
        utils = SharedEnvUtils(config_file=Path(temp_dir) / "absent.yaml")
    assert utils.get_env_var("ESCHERMERGE_LOG_LEVEL") == "WARNING"
    assert utils.get_env_var("OTHER_VAR") is None
    assert utils.logger.level == 30
