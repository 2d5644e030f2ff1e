"""Loading of game and display libraries by name."""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import Callable, Mapping, Optional, Union

from .types import ArcadeError, Game, Graphics

Factory = Callable[[], object]


class LibraryLoader:
    """Resolves a library name to its factory and creates instances from it.

    Every step is appended to a log file.
    """

    def __init__(
        self,
        path: Union[str, PurePath],
        factories: Mapping[str, Factory],
        log_path: Union[str, Path] = "DLLoader.log",
    ) -> None:
        self._name = str(path)
        self._log_path = Path(log_path)
        self._log(f"[{self._name}] Creating...")
        self._factory: Optional[Factory] = self._open(factories)
        self._log(f"[{self._name}] Created !")

    def _log(self, line: str) -> None:
        with self._log_path.open("a", encoding="utf-8") as log:
            log.write(line + "\n")

    def _open(self, factories: Mapping[str, Factory]) -> Factory:
        for key in (self._name, PurePath(self._name).name):
            if key in factories:
                return factories[key]
        self._log(f"/!\\ [{self._name}] Cannot open library: no such library")
        raise ArcadeError("Cannot open library")

    def instance(self) -> Union[Game, Graphics, None]:
        """Create a new game or display from the library."""
        factory = self._factory
        if factory is None or not callable(factory):
            reason = "library is closed" if factory is None else "not callable"
            self._log(f"/!\\ [{self._name}] Cannot load constructor: {reason}")
            raise ArcadeError("Cannot load constructor")
        created = factory()
        if isinstance(created, Graphics):
            self._log(f"[{self._name}] Graphics instance created")
            return created
        if isinstance(created, Game):
            self._log(f"[{self._name}] Game instance created")
            return created
        self._log("/!\\ LibraryLoader can only load games or graphics")
        return None

    def close(self) -> None:
        """Release the library; further instances cannot be created."""
        self._log(f"[{self._name}] Destroy")
        self._factory = None

    @property
    def name(self) -> str:
        """The library path this loader was created with."""
        return self._name

    def __enter__(self) -> "LibraryLoader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()