"""Thread-safe access to the device parameter INI file."""

from __future__ import annotations

import logging
import shutil
import threading
from os import PathLike
from pathlib import Path
from typing import Optional, Union

from ipcosd.iniparser import IniFile, load
from ipcosd.ini_lines import IniError

logger = logging.getLogger(__name__)

DEFAULT_INI_PATH = "/userdata/rkipc.ini"
FACTORY_INI_PATH = "/tmp/rkipc-factory-config.ini"


class ParamError(RuntimeError):
    """Raised when the parameter file cannot be loaded, saved or changed."""


def _log_error(message: str) -> None:
    logger.error(message.rstrip("\n"))


class ParamStore:
    """Parameters read from an INI file, with typed getters and setters.

    When the file cannot be loaded, the factory file is copied over it and
    loading is tried once more.
    """

    def __init__(
        self,
        ini_path: Optional[Union[str, PathLike]] = None,
        factory_path: Union[str, PathLike] = FACTORY_INI_PATH,
    ) -> None:
        self.path = Path(ini_path) if ini_path else Path(DEFAULT_INI_PATH)
        self.factory_path = Path(factory_path)
        self._lock = threading.RLock()
        self._ini: Optional[IniFile] = None
        logger.info("ini path is %s", self.path)
        with self._lock:
            try:
                self._ini = self._load()
            except IniError:
                logger.error(
                    "cannot load %s, using %s", self.path, self.factory_path
                )
                try:
                    shutil.copyfile(self.factory_path, self.path)
                except OSError as exc:
                    logger.error("cannot copy factory config: %s", exc)
                try:
                    self._ini = self._load()
                except IniError as exc:
                    raise ParamError(f"cannot load parameters from {self.path}") from exc
            self.dump()

    def _load(self) -> IniFile:
        return load(self.path, on_error=_log_error)

    @property
    def closed(self) -> bool:
        """True once the parameters have been dropped."""
        return self._ini is None

    def get_int(self, entry: str, default: int = 0) -> int:
        """Return ``entry`` as an integer, or ``default`` when it is absent."""
        with self._lock:
            if self._ini is None:
                return default
            return self._ini.get_int(entry, default)

    def set_int(self, entry: str, value: int) -> None:
        """Store ``value`` under ``entry`` as a decimal integer."""
        self.set_string(entry, f"{int(value)}")

    def get_string(self, entry: str, default: Optional[str] = None) -> Optional[str]:
        """Return the text of ``entry``, or ``default`` when it is absent."""
        with self._lock:
            if self._ini is None:
                return default
            return self._ini.get_string(entry, default)

    def set_string(self, entry: str, value: Optional[str]) -> None:
        """Store ``value`` under ``entry``."""
        with self._lock:
            if self._ini is None:
                raise ParamError("parameters are not loaded")
            self._ini.set(entry, value)

    def dump(self) -> list[tuple[str, str]]:
        """Log every key of every section and return them as ``(key, value)`` pairs."""
        with self._lock:
            if self._ini is None:
                return []
            pairs: list[tuple[str, str]] = []
            sections = self._ini.sections()
            logger.debug("section_num is %d", len(sections))
            for section in sections:
                keys = self._ini.section_keys(section)
                logger.debug("section_name is %s, section_keys is %d", section, len(keys))
                for key in keys:
                    value = self._ini.get_string(key, "") or ""
                    logger.debug("%s = %s", key, value)
                    pairs.append((key, value))
            return pairs

    def save(self) -> None:
        """Write the parameters back to the INI file.

        If the file cannot be opened the loaded parameters are dropped.
        """
        with self._lock:
            if self._ini is None:
                raise ParamError("parameters are not loaded")
            try:
                with open(self.path, "w", encoding="utf-8") as handle:
                    self._ini.dump_ini(handle)
            except OSError as exc:
                logger.error("%s, open error!", self.path)
                self._ini = None
                raise ParamError(f"cannot write {self.path}") from exc

    def reload(self) -> None:
        """Read the INI file again, replacing the parameters in memory."""
        with self._lock:
            self._ini = None
            try:
                self._ini = self._load()
            except IniError as exc:
                raise ParamError(f"cannot reload {self.path}") from exc
            self.dump()

    def close(self) -> None:
        """Save the parameters and drop them; closing twice does nothing."""
        with self._lock:
            if self._ini is None:
                return
            try:
                self.save()
            finally:
                self._ini = None

    def __enter__(self) -> "ParamStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()