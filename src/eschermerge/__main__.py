"""Command-line interface."""

import logging
import sys
from pathlib import Path

import click

from .escher_map_utils import EscherMetaModel
from .genome_utils import BaseGenome
from .sbml_import_utils import SbmlImportUtils
from .sbml_utils import load_sbml_model


@click.group()
@click.version_option()
def main() -> None:
    """eschermerge: extend Escher maps with reactions from SBML models."""


@main.command("import")
@click.argument("in_file", metavar="input.json", type=click.Path(exists=True, dir_okay=False, readable=True))
@click.argument("genome_file", metavar="input.gto", type=click.Path(exists=True, dir_okay=False, readable=True))
@click.argument("sbml_file", metavar="input.sbml.xml", type=click.Path(exists=True, dir_okay=False, readable=True))
@click.argument("out_file", metavar="output.json", type=click.Path(dir_okay=False, writable=True))
@click.option("--config", "config_file", type=click.Path(exists=True, dir_okay=False), help="Configuration file (YAML or INI).")
@click.option("--report", "report_file", type=click.Path(dir_okay=False, writable=True), help="Write a TSV summary of the imported reactions.")
@click.option("-v", "--verbose", is_flag=True, help="Display more detailed log messages.")
def import_command(in_file, genome_file, sbml_file, out_file, config_file, report_file, verbose):
    """Import the reactions of an SBML model into an Escher map."""
    out_dir = Path(out_file).absolute().parent
    if not out_dir.is_dir():
        raise click.BadParameter(f"Invalid or missing directory for output file {out_file}.", param_hint="output.json")
    log_level = "DEBUG" if verbose else "INFO"
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # Without -v the ESCHERMERGE_LOG_LEVEL environment variable may set the level
    level_args = {"log_level": log_level} if verbose else {}
    utils = SbmlImportUtils(config_file=config_file, **level_args)
    genome = BaseGenome.load(genome_file, log_level=log_level)
    escher_map = EscherMetaModel.load(in_file, genome, log_level=log_level)
    try:
        foreign_model = load_sbml_model(sbml_file)
        utils.import_sbml(escher_map, foreign_model)
    except ValueError as e:
        utils.log_error(f"Import from {sbml_file} failed: {e}")
        sys.exit(1)
    escher_map.save(out_file)
    if report_file:
        utils.import_report().to_csv(report_file, sep="\t", index=False)
        utils.log_info(f"Import report written to {report_file}.")


if __name__ == "__main__":
    main(prog_name="eschermerge")  # pragma: no cover
