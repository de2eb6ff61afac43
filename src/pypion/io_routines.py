"""Loading of photo-pion rate tables from plain-text data files.

Tables are resolved by photon field to a file in the data directory. Parsed
tables can optionally be cached as ``.npz`` archives keyed by the source
file's name, size and modification time.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields as dataclass_fields
import hashlib
import json
import logging
import os
from pathlib import Path

import numpy as np

from .photon_field import PhotonField
from .rate_tables import RateTable, parse_rate_table

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent
DATA_DIR = PACKAGE_DIR / "data"
TABLE_CACHE_VERSION = 1


class RateTableNotFound(FileNotFoundError):
    """Raised when a rate table data file cannot be opened."""


@dataclass
class RateTableIO:
    data_dir: Path | None = None
    enable_table_cache: bool = False
    table_cache_dir: Path | None = None

    def _resolve_data_dir(self) -> Path:
        if self.data_dir is not None:
            return Path(self.data_dir)
        env_dir = os.getenv("PYPION_DATA_DIR")
        if env_dir:
            return Path(env_dir).expanduser()
        return DATA_DIR

    def _resolve_table_cache_dir(self) -> Path:
        if self.table_cache_dir is not None:
            return Path(self.table_cache_dir)
        env_dir = os.getenv("PYPION_TABLE_CACHE_DIR")
        if env_dir:
            return Path(env_dir).expanduser()
        return Path.home() / ".cache" / "pypion"

    def table_path(self, photon_field: PhotonField) -> Path:
        return self._resolve_data_dir() / photon_field.filename

    def _table_cache_token(self, path: Path, redshift_dependent: bool) -> str:
        st = path.stat()
        payload = {
            "version": TABLE_CACHE_VERSION,
            "source": [path.name, int(st.st_size), int(st.st_mtime_ns)],
            "redshift_dependent": bool(redshift_dependent),
        }
        raw = json.dumps(payload, separators=(",", ":"), sort_keys=True).encode("utf-8")
        return hashlib.sha256(raw).hexdigest()[:16]

    def _table_cache_path(self, path: Path, redshift_dependent: bool) -> Path:
        token = self._table_cache_token(path, redshift_dependent)
        return self._resolve_table_cache_dir() / f"rate_table_v{TABLE_CACHE_VERSION}_{path.stem}_{token}.npz"

    def _load_table_cache(self, path: Path, redshift_dependent: bool) -> RateTable | None:
        cache_path = self._table_cache_path(path, redshift_dependent)
        if not cache_path.exists():
            return None
        try:
            with np.load(cache_path, allow_pickle=False) as data:
                kwargs = {}
                for f in dataclass_fields(RateTable):
                    if f.name not in data:
                        return None
                    if f.name == "redshift_dependent":
                        kwargs[f.name] = bool(data[f.name])
                    else:
                        kwargs[f.name] = np.asarray(data[f.name], dtype=float)
        except Exception as exc:
            logger.warning("Ignoring unreadable rate table cache %s: %s", cache_path, exc)
            return None
        logger.debug("Loaded rate table from cache %s", cache_path)
        return RateTable(**kwargs)

    def _save_table_cache(self, path: Path, table: RateTable) -> None:
        cache_path = self._table_cache_path(path, table.redshift_dependent)
        cache_path.parent.mkdir(parents=True, exist_ok=True)
        payload = {}
        for f in dataclass_fields(RateTable):
            value = getattr(table, f.name)
            if f.name == "redshift_dependent":
                payload[f.name] = np.array(bool(value))
            else:
                payload[f.name] = np.asarray(value)
        tmp = cache_path.with_suffix(".tmp.npz")
        np.savez(tmp, **payload)
        tmp.replace(cache_path)

    def read_rate_table(self, path: Path, redshift_dependent: bool = False) -> RateTable:
        try:
            with open(path, "r", encoding="utf-8") as fh:
                table = parse_rate_table(fh, redshift_dependent=redshift_dependent)
        except OSError as exc:
            raise RateTableNotFound(f"PhotoPionProduction: could not open file {path}") from exc
        if len(table.lorentz) == 0:
            raise ValueError(f"PhotoPionProduction: no rate records in {path}")
        return table

    def load_rate_table(self, photon_field: PhotonField) -> RateTable:
        """Load the rate table belonging to ``photon_field``."""
        path = self.table_path(photon_field)
        if not path.is_file():
            raise RateTableNotFound(f"PhotoPionProduction: could not open file {path}")

        redshift_dependent = photon_field.redshift_dependent
        table = None
        if self.enable_table_cache:
            table = self._load_table_cache(path, redshift_dependent)
        if table is None:
            table = self.read_rate_table(path, redshift_dependent=redshift_dependent)
            if self.enable_table_cache:
                self._save_table_cache(path, table)

        nz, ngamma, nproton, nneutron = table.shape
        logger.info(
            "Read %s table in %d\t%d\t%d\t%d", photon_field.value, nz, ngamma, nproton, nneutron
        )
        return table
