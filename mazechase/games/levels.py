"""
Common level support for mazechase games.

Games opt in to YAML-based levels by defining a LEVELS_DIR class attribute and
a LevelLoader subclass that turns the raw YAML dict into their own level data
class via _parse_level_data().

Example level file (classic.yaml):
    name: "Classic"
    description: "The reference maze"
    difficulty: 2
    layout: |
      XXXXX
      X P X
      XXXXX
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
import json
from pathlib import Path
from typing import Any, Dict, Generic, List, Optional, TypeVar

import yaml

from mazechase.logging import get_logger

log = get_logger('levels')

LEVEL_EXTENSIONS = ('.yaml', '.yml', '.json')


class LevelFormatError(ValueError):
    """Raised when a level file parses but describes an invalid level."""

    def __init__(self, message: str, source_path: Optional[Path] = None):
        self.source_path = source_path
        if source_path is not None:
            message = f"{source_path.name}: {message}"
        super().__init__(message)


def _load_data_file(path: Path) -> Dict[str, Any]:
    """Load a level mapping from a YAML or JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        LevelFormatError: If the top-level document is not a mapping
    """
    if not path.exists():
        raise FileNotFoundError(f"No data file found: {path}")

    with open(path, 'r') as f:
        if path.suffix == '.json':
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise LevelFormatError("level file must contain a mapping", path)
    return data


@dataclass
class LevelInfo:
    """Basic level metadata (common to all games).

    This is the minimal info needed to list levels; games parse the rest
    into their own level data class.
    """
    name: str
    slug: str  # Filename without extension, used as identifier
    description: str = ""
    difficulty: int = 1  # 1-5 scale
    author: str = "unknown"
    version: int = 1
    file_path: Optional[Path] = None


# Game-specific level data
T = TypeVar('T')


class LevelLoader(Generic[T], ABC):
    """Base class for game-specific level loaders.

    Usage:
        class MyLevelLoader(LevelLoader[MyLevelData]):
            def _parse_level_data(self, data: dict, file_path: Path) -> MyLevelData:
                return MyLevelData(name=data.get('name', 'Untitled'), ...)

        loader = MyLevelLoader(levels_dir)
        loader.list_levels()
        level_data = loader.load_level('classic')
    """

    def __init__(self, levels_dir: Path):
        """Initialize the level loader.

        Args:
            levels_dir: Directory containing level files
        """
        self._levels_dir = Path(levels_dir)
        self._info_cache: Dict[str, LevelInfo] = {}

    @property
    def levels_dir(self) -> Path:
        return self._levels_dir

    @abstractmethod
    def _parse_level_data(self, data: Dict[str, Any], file_path: Path) -> T:
        """Parse a raw level mapping into game-specific level data.

        Args:
            data: Raw YAML data dict
            file_path: Path to the level file (for error messages)

        Raises:
            LevelFormatError: If the level content is invalid
        """
        pass

    def list_levels(self) -> List[str]:
        """List available level slugs (sorted, hidden files skipped)."""
        if not self._levels_dir.exists():
            return []

        slugs = set()
        for ext in LEVEL_EXTENSIONS:
            for path in self._levels_dir.rglob(f'*{ext}'):
                if path.name.startswith(('_', '.')):
                    continue
                slugs.add(path.stem)
        return sorted(slugs)

    def get_level_info(self, slug: str) -> Optional[LevelInfo]:
        """Get level metadata without parsing the full level.

        Returns:
            LevelInfo, or None if the level is missing or unreadable
        """
        if slug in self._info_cache:
            return self._info_cache[slug]

        path = self._find_level_file(slug)
        if path is None:
            return None

        try:
            data = _load_data_file(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            log.warning("Unreadable level '%s': %s", slug, e)
            return None

        info = LevelInfo(
            name=data.get('name', slug),
            slug=slug,
            description=data.get('description', ''),
            difficulty=data.get('difficulty', 1),
            author=data.get('author', 'unknown'),
            version=data.get('version', 1),
            file_path=path,
        )
        self._info_cache[slug] = info
        return info

    def load_level(self, slug: str) -> T:
        """Load a level by slug or by path to a level file.

        Raises:
            FileNotFoundError: If the level doesn't exist
            LevelFormatError: If the level file is invalid
        """
        path = self._find_level_file(slug)
        if path is None:
            raise FileNotFoundError(f"Level not found: {slug}")

        data = _load_data_file(path)
        if not data:
            raise LevelFormatError("empty level file", path)

        return self._parse_level_data(data, path)

    def _find_level_file(self, slug: str) -> Optional[Path]:
        """Resolve a slug (or explicit path) to a level file."""
        candidate = Path(slug)
        if candidate.suffix in LEVEL_EXTENSIONS and candidate.exists():
            return candidate

        for ext in LEVEL_EXTENSIONS:
            direct = self._levels_dir / f"{slug}{ext}"
            if direct.exists():
                return direct

        for ext in LEVEL_EXTENSIONS:
            for path in self._levels_dir.rglob(f"{slug}{ext}"):
                return path

        return None
