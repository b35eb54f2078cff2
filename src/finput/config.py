"""Option resolution for finput fields and the demo app.

Priority order (highest to lowest):
1. command-line flags (demo app only)
2. ~/.config/finput/config.toml -> [finput] table
3. built-in defaults (``.`` decimal, ``,`` thousands, scale 2, fixed)
"""

from __future__ import annotations

import argparse
import logging
import tomllib
from pathlib import Path

from finput.errors import OptionsError
from finput.models import DEFAULT_OPTIONS, Options, Range

logger = logging.getLogger(__name__)

_CONFIG_PATH = Path.home() / ".config" / "finput" / "config.toml"

_SCALAR_KEYS = ("decimal", "thousands", "scale", "fixed")


def _load_config_dict(path: Path | None = None) -> dict:
    """Load the whole config file as a dict, or an empty dict when unreadable."""
    path = path or _CONFIG_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}


def _parse_range(value: str) -> Range:
    try:
        return Range(str(value).lower())
    except ValueError:
        choices = ", ".join(r.value for r in Range)
        raise OptionsError(f"range must be one of {choices}, got {value!r}") from None


def load_options(path: Path | None = None, base: Options = DEFAULT_OPTIONS) -> Options:
    """Load field options from the ``[finput]`` table of config.toml.

    Example config.toml::

        [finput]
        decimal = ","
        thousands = "."
        scale = 3
        fixed = false
        range = "positive"

        [finput.shortcuts]
        k = 1000
        t = 1000000000000

    A ``[finput.shortcuts]`` table replaces the default shortcuts entirely.

    Args:
        path: Config file to read; defaults to ``~/.config/finput/config.toml``.
        base: Options the file values are merged over.

    Returns:
        The merged Options.

    Raises:
        OptionsError: If a value in the file is invalid.
    """
    section = _load_config_dict(path).get("finput", {})
    changes: dict = {key: section[key] for key in _SCALAR_KEYS if key in section}
    if "range" in section:
        changes["range"] = _parse_range(section["range"])
    if "shortcuts" in section:
        changes["shortcuts"] = {str(k): v for k, v in section["shortcuts"].items()}
    return base.merge(**changes) if changes else base


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the demo app.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed namespace; unset option flags are None.
    """
    parser = argparse.ArgumentParser(
        prog="finput",
        description="A numeric input field with live formatting, shortcuts and undo.",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a config.toml file.")
    parser.add_argument("--decimal", default=None, help="Decimal separator character.")
    parser.add_argument("--thousands", default=None, help="Thousands separator character.")
    parser.add_argument("--scale", type=int, default=None, help="Number of decimal places.")
    parser.add_argument(
        "--fixed",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Pad the decimal part to the full scale on commit.",
    )
    parser.add_argument(
        "--range",
        choices=[r.value for r in Range],
        default=None,
        help="Allowed sign of the value.",
    )
    parser.add_argument("--value", default=None, help="Initial value of the field.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (e.g. DEBUG).")
    return parser.parse_args(argv)


def resolve_options(args: argparse.Namespace) -> Options:
    """Combine config.toml options with command-line overrides.

    Raises:
        OptionsError: If the combined options are invalid.
    """
    options = load_options(args.config)
    changes = {
        key: getattr(args, key)
        for key in _SCALAR_KEYS
        if getattr(args, key) is not None
    }
    if args.range is not None:
        changes["range"] = _parse_range(args.range)
    return options.merge(**changes) if changes else options
