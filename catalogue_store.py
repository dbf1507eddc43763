import json
import os

import numpy as np
import pandas as pd

from default_catalogue_initializer import DefaultCatalogueInitializer
from errors import CatalogueIOError
from fruit_record import FruitRecord
from logger import get_logger

logger = get_logger(__name__)

COLUMNS = ["name", "length", "width", "height"]
DIMENSIONS = ["length", "width", "height"]


def _is_number_column(series: pd.Series) -> bool:
    if pd.api.types.is_bool_dtype(series):
        return False
    if pd.api.types.is_numeric_dtype(series):
        return True
    # mixed json values land in an object column; only real numbers pass
    return bool(
        series.map(
            lambda v: isinstance(v, (int, float)) and not isinstance(v, bool)
        ).all()
    )


class CatalogueStore:
    SUPPORTED = {".json", ".csv", ".parquet"}

    def __init__(self, path: str):
        self.path = path
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

        if self.ext not in self.SUPPORTED:
            raise CatalogueIOError(
                "Unsupported file type (use .json, .csv, or .parquet)"
            )

    # ---------- load ----------
    def load(self) -> list[FruitRecord]:
        if not os.path.exists(self.path):
            raise CatalogueIOError(f"{self.path} does not exist")

        try:
            df = self._read()
        except CatalogueIOError:
            raise
        except (OSError, ValueError, TypeError) as exc:
            raise CatalogueIOError(f"Could not read {self.path}: {exc}") from exc

        return self._records_from_frame(df)

    def load_or_default(self) -> list[FruitRecord]:
        try:
            records = self.load()
        except CatalogueIOError as exc:
            logger.warning("using starter catalogue: %s", exc)
            return DefaultCatalogueInitializer().create()
        logger.info("loaded %d fruits from %s", len(records), self.path)
        return records

    def _read(self) -> pd.DataFrame:
        if self.ext == ".json":
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise CatalogueIOError(f"{self.path}: expected a list of fruits")
            return pd.DataFrame.from_records(data, columns=COLUMNS if not data else None)
        if self.ext == ".csv":
            try:
                return pd.read_csv(
                    self.path,
                    dtype={"name": str},
                    keep_default_na=False,
                    float_precision="round_trip",
                )
            except pd.errors.EmptyDataError:
                return pd.DataFrame(columns=COLUMNS)
        self._ensure_parquet_engine()
        return pd.read_parquet(self.path)

    def _records_from_frame(self, df: pd.DataFrame) -> list[FruitRecord]:
        missing = [c for c in COLUMNS if c not in df.columns]
        if missing:
            raise CatalogueIOError(f"{self.path}: missing columns {', '.join(missing)}")
        if df.empty:
            return []

        for col in DIMENSIONS:
            if not _is_number_column(df[col]):
                raise CatalogueIOError(f"{self.path}: non-numeric {col}")

        try:
            dims = df[DIMENSIONS].apply(pd.to_numeric, errors="raise")
        except (ValueError, TypeError) as exc:
            raise CatalogueIOError(f"{self.path}: non-numeric dimension ({exc})") from exc

        values = dims.to_numpy(dtype=float)
        valid = np.isfinite(values) & (values > 0)
        if not valid.all():
            bad_row = int(np.argmin(valid.all(axis=1)))
            raise CatalogueIOError(
                f"{self.path}: row {bad_row + 1} has an invalid dimension"
            )

        names = df["name"]
        if not names.map(lambda v: isinstance(v, str)).all():
            raise CatalogueIOError(f"{self.path}: fruit name must be text")
        names = names.str.strip()
        if (names == "").any():
            raise CatalogueIOError(f"{self.path}: fruit without a name")

        return [
            FruitRecord(name=name, length=float(l), width=float(w), height=float(h))
            for name, (l, w, h) in zip(names, values)
        ]

    # ---------- save ----------
    def save(self, records: list[FruitRecord]) -> None:
        df = pd.DataFrame([r.to_dict() for r in records], columns=COLUMNS)
        try:
            self._write(df)
        except CatalogueIOError:
            raise
        except (OSError, ValueError, TypeError) as exc:
            logger.error("save to %s failed: %s", self.path, exc)
            raise CatalogueIOError(str(exc)) from exc
        logger.info("saved %d fruits to %s", len(records), self.path)

    def _write(self, df: pd.DataFrame) -> None:
        if self.ext == ".json":
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(df.to_dict(orient="records"), f, indent=2)
                f.write("\n")
        elif self.ext == ".csv":
            df.to_csv(self.path, index=False)
        else:
            self._ensure_parquet_engine()
            df.to_parquet(self.path, index=False)

    def _ensure_parquet_engine(self):
        try:
            import pyarrow  # noqa: F401

            return
        except ImportError:
            pass
        raise CatalogueIOError(
            "Parquet support requires pyarrow. Install via: pip install pyarrow"
        )
