from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import typer

from ..core.configuration import Configuration
from ..core.errors import ConfigurationError
from ..core.freeze import thaw

app = typer.Typer(help="Confreeze CLI")


def _parse_document(raw: str, option: str) -> Dict[str, Any]:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"Invalid JSON: {e}", param_hint=option) from e


def _echo(value: Any) -> None:
    typer.echo(json.dumps(thaw(value), indent=2, default=str))


@app.command()
def get(
    path: Optional[str] = typer.Argument(None, help="Path of the value, omit for the whole tree"),
    data: Optional[List[str]] = typer.Option(None, "--data", "-d", help="JSON object to merge, repeatable"),
    separator: str = typer.Option(".", "--separator"),
    loose: bool = typer.Option(False, "--loose", help="Return the default for missing paths"),
    default: Optional[str] = typer.Option(None, "--default"),
):
    try:
        cfg = Configuration(path_separator=separator, strict=not loose)
        for raw in data or []:
            cfg.merge(_parse_document(raw, "--data"))
        _echo(cfg.commit().get(path, default))
    except (ConfigurationError, ValueError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


@app.command("get-env")
def get_env(
    path: Optional[str] = typer.Argument(None, help="Path relative to the namespace"),
    env: str = typer.Option("{}", "--env", "-e", help="JSON object holding the environment"),
    namespace: str = typer.Option("", "--namespace", "-n"),
    separator: str = typer.Option(".", "--separator"),
    loose: bool = typer.Option(False, "--loose", help="Return the default for missing paths"),
    default: Optional[str] = typer.Option(None, "--default"),
):
    environment = _parse_document(env, "--env")
    try:
        cfg = Configuration(
            environment=environment,
            env_namespace=namespace,
            path_separator=separator,
            strict_env=not loose,
        )
        _echo(cfg.get_env(path, default))
    except (ConfigurationError, ValueError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
