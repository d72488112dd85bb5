"""Scaffold CLI generating the clean architecture files of one entity."""

import logging
import sys
from pathlib import Path

import click

from clean_scaffold.application.entity_definition_service import EntityDefinitionService
from clean_scaffold.application.scaffold_service import ScaffoldService
from clean_scaffold.domain.aggregator import AggregatorPatcher
from clean_scaffold.domain.exceptions import ScaffoldError
from clean_scaffold.domain.models import ScaffoldSettings
from clean_scaffold.infrastructure.factory import InfrastructureFactory
from clean_scaffold.logging_config import setup_logging

logger = logging.getLogger(__name__)


@click.command()
@click.option("--entity", "-e", help="Singular entity name, e.g. Widget")
@click.option("--plural", "-p", help="Plural entity name (defaults to the name plus 's')")
@click.option(
    "--field",
    "-f",
    "fields",
    multiple=True,
    help="Field as name:STORAGE:type[:@Attr,@Attr], e.g. id:INTEGER:number:@PrimaryKey",
)
@click.option(
    "--definition",
    "-d",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML or JSON entity definition (replaces --entity/--field)",
)
@click.option("--root", "-r", default=".", help="Root directory of the target project")
@click.option("--env-file", default=".env", help="File holding the *_TEMPLATE locations")
@click.option("--templates-dir", help="Directory relative template paths resolve against")
@click.option("--aggregator-file", default="sequelize.ts", help="Aggregator file name")
@click.option("--no-aggregator", is_flag=True, help="Do not register the entity")
@click.option("--dry-run", is_flag=True, help="Only list the files that would be written")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (defaults to LOG_LEVEL or WARNING)",
)
def main(
    entity,
    plural,
    fields,
    definition,
    root,
    env_file,
    templates_dir,
    aggregator_file,
    no_aggregator,
    dry_run,
    log_level,
):
    """Generate model, repository, use cases, utils, controller and routes for an entity."""
    setup_logging(log_level)

    adapters = InfrastructureFactory.create_all_adapters(templates_dir=templates_dir)
    console = adapters["console"]

    try:
        settings = ScaffoldSettings(
            project_root=root,
            env_file=env_file,
            templates_dir=templates_dir,
            aggregator_file=aggregator_file,
            patch_aggregator=not no_aggregator,
        )

        # Fields are validated before anything touches the file system
        definitions = EntityDefinitionService()
        if definition:
            configuration = adapters["configuration"]
            document = configuration.load_configuration(definition)
            is_valid, errors = configuration.validate_configuration(document)
            if not is_valid:
                for error in errors:
                    console.print_error(error)
                sys.exit(1)
            entity_name, properties = definitions.from_mapping(document)
        else:
            if not entity:
                raise click.UsageError("Either --definition or --entity is required")
            entity_name, properties = definitions.from_options(entity, plural, fields)

        if not adapters["environment"].load_env_file(settings.env_file):
            console.print_warning(
                f"No variables loaded from {settings.env_file}, using the process environment"
            )

        service = ScaffoldService(
            console=console,
            file_system=adapters["file_system"],
            template_source=adapters["template_source"],
            patcher=AggregatorPatcher(adapters["registration_format"]),
            aggregator_file=settings.aggregator_file,
        )

        if dry_run:
            planned = service.plan(entity_name, settings.project_root, settings.patch_aggregator)
            console.print_table(
                ["Shape", "Path"],
                [[shape, path] for shape, path in planned],
                title=f"Files for {entity_name.singular}",
            )
            return

        written = service.generate(
            entity_name, properties, settings.project_root, settings.patch_aggregator
        )
        console.print(f"📁 Project location: {Path(settings.project_root).resolve()}")
        logger.info("Run finished, %d files written", len(written))

    except (ScaffoldError, OSError, ValueError) as e:
        logger.debug("Scaffolding failed", exc_info=True)
        console.print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
