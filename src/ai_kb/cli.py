"""CLI interface for ai-kb"""

import logging
from pathlib import Path
from typing import List, Optional

import click

from ai_kb.application.knowledge_base_service import KnowledgeBaseService
from ai_kb.domain.errors import ConfigurationError
from ai_kb.domain.models.section_result import SectionResult
from ai_kb.infrastructure.config.config_manager import ConfigManager
from ai_kb.infrastructure.config.section_loader import load_sections

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    logging.getLogger().setLevel(level)
    for logger_name in logging.Logger.manager.loggerDict:
        logging.getLogger(logger_name).setLevel(level)


def _die(message: str, verbose: bool = False, exc: Optional[Exception] = None) -> None:
    """Exit with a user-friendly error message"""
    if exc is not None:
        logger.error(message, exc_info=verbose)
    else:
        logger.error(message)
    raise click.ClickException(message)


def _build_overrides(
    verbose: bool,
    mode: Optional[str],
    config: Optional[Path],
    root: Optional[Path],
    output_dir: Optional[Path],
) -> dict:
    """Translate CLI options into a nested settings dict (None = not given)"""
    return {
        "sections_file": str(config.absolute()) if config else None,
        "root": str(root) if root else None,
        "run": {"verbose": True if verbose else None, "mode": mode},
        "output": {"directory": str(output_dir.absolute()) if output_dir else None},
    }


def _output_results(results: List[SectionResult]) -> None:
    """Print generated documents and any non-fatal errors

    Args:
        results: Results of the run, in section order
    """
    for result in results:
        if result.was_written and result.has_files:
            click.echo(f"[{result.name}] {len(result.files)} files -> {result.output_path}")
        elif result.was_written:
            click.echo(f"[{result.name}] -> {result.output_path}")
        elif not result.has_files and result.is_successful:
            click.echo(f"[{result.name}] no matching files, skipped")

    written = sum(1 for r in results if r.was_written)
    click.echo(f"\n{written} of {len(results)} documents generated")

    failed = [r for r in results if not r.is_successful]
    if not failed:
        click.echo("Completed!")
        return

    click.echo("Completed with errors:", err=True)
    for result in failed:
        for error in result.errors:
            click.echo(f"  [{result.name}] {error}", err=True)


@click.command()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose (DEBUG) logging")
@click.option(
    "--mode",
    type=click.Choice(["generate", "tree"], case_sensitive=False),
    help="generate: one document per section (default); tree: project tree document",
)
@click.option(
    "--config",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the sections file (default: .ai-kb-config in the project root)",
)
@click.option(
    "--settings",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to .ai-kb.yml settings file",
)
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project root patterns are resolved against (default: current directory)",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for generated documents (default: project root)",
)
def cli(
    verbose: bool,
    mode: Optional[str],
    config: Optional[Path],
    settings: Optional[Path],
    root: Optional[Path],
    output_dir: Optional[Path],
):
    """ai-kb - build AI-ready knowledge base documents from project files"""
    setup_logging(verbose)

    try:
        config_manager = ConfigManager(
            settings_path=settings,
            overrides=_build_overrides(
                verbose, mode.lower() if mode else None, config, root, output_dir
            ),
        )
    except ConfigurationError as e:
        _die(str(e), verbose=verbose, exc=e)

    run_options = config_manager.get_run_options()
    verbose = run_options.verbose
    if verbose:
        setup_logging(verbose=True)

    try:
        service = KnowledgeBaseService(
            root=config_manager.root,
            output_dir=config_manager.output_directory,
            output_config=config_manager.get_output_config(),
        )

        if run_options.mode == "tree":
            results = [service.generate_tree()]
        else:
            try:
                sections = load_sections(config_manager.sections_path)
            except ConfigurationError as e:
                _die(str(e), verbose=verbose, exc=e)
            results = service.generate(sections)

        _output_results(results)

    except click.ClickException:
        raise
    except Exception as e:
        _die(f"Fatal error: {e}", verbose=verbose, exc=e)


def main():
    """Main entry point"""
    cli()


if __name__ == "__main__":
    main()
