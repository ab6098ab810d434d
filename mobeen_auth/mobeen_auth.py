import json

import click

from . import __version__
from .cli_utils import setup_logging
from .config import ConfigError, ScaffoldConfig
from .paths import resolve_paths
from .pipeline import SetupPipeline


def load_config(path):
    """Read a JSON config file into a ScaffoldConfig."""
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigError(f"Not a UTF-8 file: {e}") from e
    return ScaffoldConfig.from_dict(data)


@click.command()
@click.version_option(version=__version__, prog_name="mobeen-auth")
@click.option(
    "--project-dir",
    "-p",
    default=None,
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Project to install into (default: current directory)",
)
@click.option(
    "--template-dir",
    "-t",
    default=None,
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Template tree to merge (default: bundled templates)",
)
@click.option(
    "--config",
    "-c",
    default=None,
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="JSON file overriding packages, commands and template layout",
)
@click.option("--skip-install", is_flag=True, default=False, help="Do not install npm dependencies")
@click.option("--skip-generate", is_flag=True, default=False, help="Do not run prisma generate")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Also show stage boundaries and command lines")
@click.option("--quiet", "-q", is_flag=True, default=False, help="Only show errors")
def mobeen_auth(project_dir, template_dir, config, skip_install, skip_generate, verbose, quiet):
    """Scaffold the mobeen-auth files into a Next.js project.

    Existing files are never overwritten.
    """
    setup_logging(verbose=verbose, quiet=quiet)

    if config is not None:
        try:
            config = load_config(config)
        except ConfigError as e:
            raise click.BadParameter(str(e), param_hint="'--config'") from e
    else:
        config = ScaffoldConfig()

    paths = resolve_paths(project_dir=project_dir, template_dir=template_dir)
    pipeline = SetupPipeline(paths, config, skip_install=skip_install, skip_generate=skip_generate)

    # Stage failures are logged by the pipeline; the exit status stays 0
    pipeline.run()
