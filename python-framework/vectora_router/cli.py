import os
import logging
import sys
import typer
import importlib
from watchfiles import run_process
from dataclasses import replace
from typing import Any, Optional

from .config import RouterConfig
from .navigation import NavigationInstruction
from .observability import setup_logging
from .pipeline import build_guard_pipeline

app = typer.Typer()

@app.callback()
def main():
    """
    Check navigation guards without mounting any view.
    """

def load_instruction(app_import: str) -> Any:
    """
    Import 'module:attribute' and return the instruction it names.

    The attribute may be an instruction or a zero-argument factory returning one.
    """
    if os.getcwd() not in sys.path:
        sys.path.insert(0, os.getcwd())

    try:
        module_name, obj_name = app_import.split(":")
    except ValueError:
        raise typer.BadParameter(
            f"Invalid import string '{app_import}'. Format must be 'module:attribute'"
        )

    try:
        module = importlib.import_module(module_name)
        obj = getattr(module, obj_name)
    except (ImportError, AttributeError) as e:
        raise typer.BadParameter(f"Cannot load '{app_import}': {e}")

    if callable(obj) and not isinstance(obj, NavigationInstruction):
        obj = obj()

    if not hasattr(obj, "plan"):
        raise typer.BadParameter(f"'{app_import}' is not a navigation instruction")
    return obj

def run_check(app_import: str, config: RouterConfig) -> bool:
    """
    Load the instruction and run the guard pipeline over it.
    This function is also run by watchfiles in a subprocess, so it sets up
    logging itself.
    """
    handler = setup_logging(config.log_level, config.log_format)
    try:
        instruction = load_instruction(app_import)
        result = build_guard_pipeline(config).run_sync(instruction)
    finally:
        logging.getLogger("vectora_router").removeHandler(handler)

    if result.completed:
        typer.echo("permitted")
    else:
        typer.echo("cancelled")
    return result.completed

@app.command()
def check(
    app_import: str = typer.Argument(..., help="Instruction import string, e.g. 'routes:checkout'"),
    log_level: Optional[str] = typer.Option(None, help="Log level (default from VECTORA_ROUTER_LOG_LEVEL)"),
    log_format: Optional[str] = typer.Option(None, help="'text' or 'json'"),
    watch: bool = typer.Option(False, help="Re-run the check whenever files change"),
):
    """
    Report whether a navigation would be permitted by its guards.
    """
    config = RouterConfig.from_env()
    config = replace(
        config,
        log_level=(log_level or config.log_level).upper(),
        log_format=(log_format or config.log_format).lower(),
    )

    if watch:
        typer.echo(f"Watching for changes in {os.getcwd()}")
        run_process(
            os.getcwd(),
            target=run_check,
            args=(app_import, config)
        )
        return

    if not run_check(app_import, config):
        raise typer.Exit(code=1)

if __name__ == "__main__":
    app()
