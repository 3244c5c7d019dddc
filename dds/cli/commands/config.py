"""Config management commands."""

import json
import sys
from pathlib import Path

import cyclopts

app = cyclopts.App(name="config", help="Manage DDS configuration")


@app.command
def validate(path: Path) -> None:
    """Validate a config file.

    Args:
        path: Path to the YAML config file.
    """
    import pydantic
    import yaml

    from dds.config import Config

    if not path.exists():
        print(f"Error: {path} not found", file=sys.stderr)
        sys.exit(1)

    try:
        data = yaml.safe_load(path.read_text()) or {}
        Config.model_validate(data)
    except (yaml.YAMLError, pydantic.ValidationError) as e:
        print(f"✗ {path} is invalid: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"✓ {path} is valid")


@app.command
def show() -> None:
    """Show current effective config."""
    from dds.config import Config

    config = Config()
    print(json.dumps(config.model_dump(mode="json"), indent=2, default=str))
