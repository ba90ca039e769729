from __future__ import annotations

from collections.abc import Callable
import json
import logging
from pathlib import Path
from typing import Any, TypeVar, cast

from omegaconf import OmegaConf
import typer

from .errors import ScaffoldError
from .pipeline.graph import build_graph

app = typer.Typer(help="Mirror a source tree into a test-directory scaffold")

# Sub-typer for config utilities
config_app = typer.Typer(help="Configuration commands")
app.add_typer(config_app, name="config")

CONFIG_PATH = Path("configs/default.yaml")
DEFAULT_SOURCE = "./src"
DEFAULT_TESTS = "./tests"

# ---- B008-safe Typer option defaults (avoid calling typer.Option in signature) ----
SOURCE_OPT = typer.Option(None, "--source", "-s", help=f"Source tree (default {DEFAULT_SOURCE})")
TEST_OPT = typer.Option(None, "--test", "-t", help=f"Test tree to create (default {DEFAULT_TESTS})")

# ---- Typed decorator wrappers to keep mypy happy ----
F = TypeVar("F", bound=Callable[..., Any])


def typed_command(*dargs: Any, **dkwargs: Any) -> Callable[[F], F]:
    """A typed wrapper around app.command to avoid mypy 'Untyped decorator' errors."""
    dec = app.command(*dargs, **dkwargs)

    def _decorator(fn: F) -> F:
        dec(fn)
        return fn

    return _decorator


def typed_command_for(app_obj: typer.Typer, *dargs: Any, **dkwargs: Any) -> Callable[[F], F]:
    """Same as typed_command, but for a provided Typer instance (e.g., subcommands)."""
    dec = app_obj.command(*dargs, **dkwargs)

    def _decorator(fn: F) -> F:
        dec(fn)
        return fn

    return _decorator


def _load_cfg() -> dict[str, Any]:
    p = CONFIG_PATH
    if p.exists():
        try:
            obj: Any = OmegaConf.to_container(OmegaConf.load(str(p)), resolve=True)
            return cast(dict[str, Any], obj) if isinstance(obj, dict) else {}
        except Exception:
            return {}
    return {}


def _initial_state(source: Path | None, test: Path | None) -> dict[str, Any]:
    cfg = _load_cfg()
    return {
        "source_path": str(source if source is not None else cfg.get("source") or DEFAULT_SOURCE),
        "test_path": str(test if test is not None else cfg.get("tests") or DEFAULT_TESTS),
    }


def _run(state: dict[str, Any], dry_run: bool) -> dict[str, Any]:
    try:
        final_state: dict[str, Any] = build_graph(dry_run=dry_run).invoke(state)
    except ScaffoldError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except OSError as exc:
        if exc.filename is None:
            typer.echo(f"error: {exc}", err=True)
        else:
            reason = exc.strerror or exc.__class__.__name__
            typer.echo(f"error: {reason}: {exc.filename}", err=True)
        raise typer.Exit(code=1) from exc
    return final_state


@typed_command(name="scaffold")
def scaffold_cmd(
    source: Path | None = SOURCE_OPT,
    test: Path | None = TEST_OPT,
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    """Create missing test files and directories mirroring the source tree."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    final_state = _run(_initial_state(source, test), dry_run=False)
    if verbose:
        build_root = Path(final_state["build_root"])
        typer.echo(f"Build root: {build_root.resolve()}")
        typer.echo(f"Tests:      {(build_root / final_state['root_name']).resolve()}")
        created = cast(list[str], final_state.get("created", []) or [])
        for p in created:
            typer.echo(f"+ {p}")
        typer.echo(final_state.get("report", "done"))


@typed_command(name="plan")
def plan_cmd(
    source: Path | None = SOURCE_OPT,
    test: Path | None = TEST_OPT,
) -> None:
    """Print the planned test tree as JSON without writing anything."""
    final_state = _run(_initial_state(source, test), dry_run=True)
    typer.echo(json.dumps(final_state["plan"], indent=2))


# -----------------------
# config subcommands
# -----------------------

_DEFAULT_CONFIG_YAML = f"""\
# mirror-scaffold - default config
source: {DEFAULT_SOURCE}
tests: {DEFAULT_TESTS}
"""


@typed_command_for(config_app, name="init")
def config_init(
    path: Path = CONFIG_PATH,
    overwrite: bool = typer.Option(False, "--overwrite"),
) -> None:
    """Create a default config file at configs/default.yaml."""
    if path.exists() and not overwrite:
        typer.echo(f"Config already exists at {path}. Use --overwrite to replace.")
        raise typer.Exit(code=1)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(_DEFAULT_CONFIG_YAML)
    typer.echo(f"Wrote {path}")


if __name__ == "__main__":
    app()
