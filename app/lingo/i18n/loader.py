"""Catalog loading interface and implementations.

Defines the contract for producing a CatalogSet and provides a YAML-based
loader.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from lingo.core.logging import get_module_logger
from lingo.i18n.exceptions import InvalidCatalogSet, InvalidLocale
from lingo.i18n.models import Catalog, CatalogSet, Locale

logger = get_module_logger()

YAML_SUFFIXES = (".yml", ".yaml")

_NULL_TAG = "tag:yaml.org,2002:null"


class _TextLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain scalars as text.

    Only null is still resolved, so "No", "010" and "1.50" reach the
    catalog exactly as written.
    """

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag == _NULL_TAG]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


class CatalogLoader(ABC):
    """Abstract base for catalog loaders.

    Implementations decide where templates live (files, database, network)
    and hand back a fully built CatalogSet.
    """

    @abstractmethod
    def load_all(self) -> CatalogSet:
        """Load every available catalog.

        Returns:
            CatalogSet with one catalog per locale plus the default catalog.

        Raises:
            InvalidCatalogSet: If no default catalog can be produced.
            ValueError: If the backing data cannot be parsed.
        """
        pass


class YAMLCatalogLoader(CatalogLoader):
    """Loader for YAML message catalogs.

    Expects files named ``<name>.yml`` for the default catalog and
    ``<name>.<locale>.yml`` for locale catalogs, e.g. ``messages.yml``,
    ``messages.fr.yml``, ``messages.pt-BR.yml``. Nested mappings are
    flattened into dot-separated keys.

    Attributes:
        catalog_dir: Directory containing YAML files.
        basename: Only files whose name part equals this are read, if set.
    """

    def __init__(self, catalog_dir: Path, basename: Optional[str] = None):
        """Initialize YAML catalog loader.

        Args:
            catalog_dir: Directory with YAML catalog files.
            basename: Optional file name filter (e.g., "messages").

        Raises:
            ValueError: If the directory does not exist.
        """
        self.catalog_dir = Path(catalog_dir)
        self.basename = basename

        if not self.catalog_dir.is_dir():
            raise ValueError(f"Catalog directory not found: {self.catalog_dir}")

        logger.info(
            "initialized_yaml_loader",
            catalog_dir=str(self.catalog_dir),
            basename=basename,
        )

    def load_all(self) -> CatalogSet:
        """Read every matching YAML file into a CatalogSet.

        Files for the same locale are merged in sorted filename order, later
        files overriding earlier ones.

        Returns:
            CatalogSet built from the directory.

        Raises:
            InvalidCatalogSet: If no default catalog file exists.
            ValueError: If a YAML file fails to parse or cannot be read.
        """
        default: Optional[Dict[str, str]] = None
        per_locale: Dict[Locale, Dict[str, str]] = {}
        file_count = 0

        for path, locale in self._discover():
            messages = self._read_file(path)
            file_count += 1
            if locale is None:
                default = {**(default or {}), **messages}
            else:
                per_locale.setdefault(locale, {}).update(messages)

        if default is None:
            logger.error("missing_default_catalog", catalog_dir=str(self.catalog_dir))
            raise InvalidCatalogSet(
                f"no default catalog file found in {self.catalog_dir}"
            )

        catalog_set = CatalogSet(
            catalogs={
                locale: Catalog(locale=locale, messages=messages)
                for locale, messages in per_locale.items()
            },
            default=Catalog(locale=None, messages=default),
        )

        logger.info(
            "loaded_catalogs",
            file_count=file_count,
            locale_count=len(per_locale),
            default_size=len(default),
        )
        return catalog_set

    def _discover(self) -> List[Tuple[Path, Optional[Locale]]]:
        try:
            entries = sorted(self.catalog_dir.iterdir())
        except OSError as e:
            logger.error(
                "catalog_dir_unreadable",
                catalog_dir=str(self.catalog_dir),
                error=str(e),
            )
            raise ValueError(f"Failed to read {self.catalog_dir}: {e}") from e

        found = []
        for path in entries:
            if not path.is_file() or path.suffix not in YAML_SUFFIXES:
                continue

            # "messages.pt-BR.yml" -> ("messages", "pt-BR")
            name, _, tag = path.stem.partition(".")
            if self.basename is not None and name != self.basename:
                continue

            if not tag:
                found.append((path, None))
                continue

            try:
                found.append((path, Locale.parse(tag)))
            except InvalidLocale:
                logger.warning("skipped_unrecognized_locale_file", file=str(path))

        return found

    def _read_file(self, path: Path) -> Dict[str, str]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.load(f, Loader=_TextLoader)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e
        except OSError as e:
            logger.error("catalog_file_unreadable", file=str(path), error=str(e))
            raise ValueError(f"Failed to read {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning("invalid_yaml_format", file=str(path), expected="dict")
            return {}

        return _flatten(data)


def _flatten(data: Dict[Any, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten nested mappings into dot-separated keys."""
    flat: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, prefix=f"{full_key}."))
        elif value is None:
            logger.warning("skipped_empty_message", key=full_key)
        else:
            flat[full_key] = str(value)
    return flat
