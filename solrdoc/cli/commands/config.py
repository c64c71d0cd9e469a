"""Config management commands."""

import json
import sys
from pathlib import Path

import cyclopts

app = cyclopts.App(name="config", help="Manage solrdoc configuration")

TEMPLATE = """\
# solrdoc configuration
# Point SOLRDOC_CONFIG_FILE at this file; SOLRDOC_* env vars override it.

mapper:
  default_boost: 1.0
  type_field: type_t
  primary_key_field: pk_s
  accessor_suffix: _for_index  # title -> record.title_for_index()
  backend: sqlalchemy  # or: attribute
  # identity_attribute: id  # attribute backend only

indexing:
  enabled: true

solr:
  url: http://localhost:8983/solr/default
  timeout: 10
  index_time_boosts: true  # set false for Solr 7+

# logging:
#   level: DEBUG
"""


DEFAULT_CONFIG_NAME = "solrdoc.yaml"


@app.command
def init(path: Path = Path(DEFAULT_CONFIG_NAME)) -> None:
    """Create a new config file from template.

    Args:
        path: Path for the config file. Defaults to ./solrdoc.yaml
    """
    if path.is_dir():
        print(f"Error: {path} is a directory, not a file path", file=sys.stderr)
        sys.exit(1)

    if path.exists():
        print(f"Error: {path} already exists (refusing to overwrite)", file=sys.stderr)
        sys.exit(1)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(TEMPLATE)
    print(f"Created config at {path}")
    print(f"Use it with: export SOLRDOC_CONFIG_FILE={path}")


@app.command
def validate(path: Path = Path(DEFAULT_CONFIG_NAME)) -> None:
    """Validate a config file.

    Args:
        path: Path to the config file. Defaults to ./solrdoc.yaml
    """
    import yaml
    from pydantic import ValidationError

    from solrdoc.config import Config

    if not path.exists():
        print(f"Error: {path} not found", file=sys.stderr)
        sys.exit(1)

    try:
        data = yaml.safe_load(path.read_text()) or {}
        Config.model_validate(data)
        print(f"✓ {path} is valid")
    except (yaml.YAMLError, ValidationError) as e:
        print(f"✗ {path} is invalid: {e}", file=sys.stderr)
        sys.exit(1)


@app.command
def show() -> None:
    """Show current effective config."""
    from solrdoc.config import Config

    config = Config()
    print(json.dumps(config.model_dump(mode="json"), indent=2, default=str))
