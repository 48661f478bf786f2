"""Registry file: the ordered list of repository identifiers."""

import os
import logging
from typing import List, Optional

from .errors import RegistryUnavailable
from .identifier import normalize

logger = logging.getLogger('prj')

REGISTRY_TEMPLATE = """# Current Projects Configuration
# Add your git repository URLs below, one per line
#
# Example:
# git@github.com:username/repo.git
"""


class Registry:
    """Line-oriented registry of raw repository identifiers.

    Blank lines and lines starting with '#' are ignored when reading but
    preserved when the file is rewritten.
    """

    def __init__(self, path: str):
        """Initialize registry.

        Args:
            path: Path to the registry file
        """
        self.path = path

    def exists(self) -> bool:
        """Check if the registry file exists."""
        return os.path.isfile(self.path)

    def create(self) -> bool:
        """Create the registry file with a commented template.

        Returns:
            True if the file was created, False if it already existed
        """
        if self.exists():
            return False
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, 'x', encoding='utf-8') as f:
            f.write(REGISTRY_TEMPLATE)
        logger.info(f"Created registry at {self.path}")
        return True

    def _read_text(self) -> str:
        try:
            with open(self.path, encoding='utf-8') as f:
                return f.read()
        except FileNotFoundError:
            raise RegistryUnavailable(self.path)
        except OSError as e:
            raise RegistryUnavailable(self.path, str(e)) from e
        except UnicodeDecodeError as e:
            raise RegistryUnavailable(self.path, f"not valid UTF-8: {e}") from e

    def read(self) -> List[str]:
        """Read the registered identifiers in file order.

        Returns:
            Raw identifiers with comments and blank lines filtered out

        Raises:
            RegistryUnavailable: If the file is missing or unreadable
        """
        identifiers = []
        for line in self._read_text().splitlines():
            line = line.strip()
            if line and not line.startswith('#'):
                identifiers.append(line)
        return identifiers

    def contains(self, raw: str) -> bool:
        """Check if an identifier is already registered.

        Comparison ignores case and a trailing .git suffix.
        """
        key = normalize(raw)
        return any(normalize(existing) == key for existing in self.read())

    def append(self, raw: str) -> None:
        """Append an identifier as a new line at the end of the file.

        Raises:
            RegistryUnavailable: If the file is missing or unreadable
        """
        content = self._read_text()
        line = raw.strip() + "\n"
        if content and not content.endswith("\n"):
            line = "\n" + line
        with open(self.path, 'a', encoding='utf-8') as f:
            f.write(line)
        logger.info(f"Appended {raw.strip()} to {self.path}")

    def remove(self, raw: str) -> bool:
        """Remove the first line holding the given identifier.

        Args:
            raw: Identifier exactly as returned by read()

        Returns:
            True if a line was removed
        """
        lines = self._read_text().splitlines(keepends=True)
        target: Optional[int] = None
        for i, line in enumerate(lines):
            if line.strip() == raw.strip():
                target = i
                break
        if target is None:
            return False

        del lines[target]
        tmp_path = self.path + ".tmp"
        try:
            with open(tmp_path, 'w', encoding='utf-8') as f:
                f.writelines(lines)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        logger.info(f"Removed {raw.strip()} from {self.path}")
        return True
