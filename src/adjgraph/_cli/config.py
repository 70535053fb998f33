"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from enum import StrEnum, unique
from pathlib import Path


class ConfigError(Exception):
    """Error in adjgraph configuration."""


@unique
class GraphKind(StrEnum):
    """Kind of graph built from command-line edges."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


@unique
class TraversalMethod(StrEnum):
    """Traversal used by the ``traverse`` command."""

    DFS = "dfs"
    BFS = "bfs"
    EDGE_BFS = "edge-bfs"


@dataclass(slots=True, frozen=True)
class AdjgraphConfig:
    """Configuration loaded from the ``[tool.adjgraph]`` table of pyproject.toml.

    Command-line options take precedence over these values.
    """

    kind: GraphKind = GraphKind.DIRECTED
    traversal: TraversalMethod = TraversalMethod.BFS
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_choice[E: StrEnum](section: dict[str, object], key: str, enum_type: type[E], default: E) -> E:
    """Parse an optional string field restricted to the values of ``enum_type``.

    Raises:
        ConfigError: If the value is not a string or not an allowed choice.

    """
    if key not in section:
        return default

    value = section[key]
    if not isinstance(value, str):
        msg = f"Invalid [tool.adjgraph].{key}: expected string"
        raise ConfigError(msg)

    try:
        return enum_type(value)
    except ValueError as e:
        choices = ", ".join(f"'{member.value}'" for member in enum_type)
        msg = f"Invalid [tool.adjgraph].{key} '{value}'. Expected one of: {choices}"
        raise ConfigError(msg) from e


def load_config(pyproject_path: Path) -> AdjgraphConfig:
    """Load and validate [tool.adjgraph] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed AdjgraphConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("adjgraph", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.adjgraph]: expected a table"
        raise ConfigError(msg)

    return AdjgraphConfig(
        kind=_parse_choice(section, "kind", GraphKind, GraphKind.DIRECTED),
        traversal=_parse_choice(section, "traversal", TraversalMethod, TraversalMethod.BFS),
        project_root=project_root,
    )


def get_config(start_dir: Path | None = None) -> AdjgraphConfig:
    """Get config from pyproject.toml in start_dir (default: cwd) or its parents.

    Returns:
        AdjgraphConfig (defaults if no pyproject.toml or no [tool.adjgraph] section)

    """
    pyproject_path = find_pyproject_toml(start_dir)
    if pyproject_path is None:
        return AdjgraphConfig()
    return load_config(pyproject_path)
