"""Export helpers for aerodynamic results and sweep series."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import asdict, is_dataclass
from numbers import Number
from pathlib import Path
from typing import Any

from aerosim.aero.forces import AeroResult
from aerosim.analysis.kpi import AeroKpis
from aerosim.utils.exceptions import ConfigurationError, ExportError

logger = logging.getLogger(__name__)

DEFAULT_CSV_FILENAME = "aero_data.csv"
CSV_DELIMITER = ","


def _record_to_mapping(record: Any) -> dict[str, Any]:
    """Convert one flat record into an insertion-ordered mapping.

    Args:
        record: Dataclass instance or mapping with scalar values.

    Returns:
        Field-name to value mapping.

    Raises:
        aerosim.utils.exceptions.ExportError: If the record type is
            unsupported or a value is not a scalar.
    """
    if is_dataclass(record) and not isinstance(record, type):
        row = asdict(record)
    elif isinstance(record, Mapping):
        row = dict(record)
    else:
        msg = f"unsupported record type: {type(record).__name__}"
        raise ExportError(msg)

    for name, value in row.items():
        if not isinstance(value, (Number, str)):
            msg = f"record field {name!r} is not a scalar value"
            raise ExportError(msg)
    return row


def records_to_csv_text(records: Sequence[Any]) -> str:
    """Serialize flat records to comma-separated text.

    The header is taken from the first record's field names in insertion
    order. Values are written with ``str`` and are not quoted, so values
    containing the delimiter produce malformed rows.

    Args:
        records: Non-empty sequence of dataclass instances or mappings.

    Returns:
        CSV text with a header row and one row per record.

    Raises:
        aerosim.utils.exceptions.ExportError: If ``records`` is empty or a
            record is not flat.
    """
    if not records:
        msg = "cannot export an empty record sequence"
        raise ExportError(msg)
    rows = [_record_to_mapping(record) for record in records]
    header = CSV_DELIMITER.join(rows[0].keys())
    body = "\n".join(CSV_DELIMITER.join(str(value) for value in row.values()) for row in rows)
    return header + "\n" + body


def export_records_csv(records: Sequence[Any], path: str | Path) -> Path:
    """Write flat records such as sweep points to a CSV file.

    Args:
        records: Non-empty sequence of dataclass instances or mappings.
        path: Output file path, or a directory receiving ``aero_data.csv``.

    Returns:
        Path of the written file.

    Raises:
        aerosim.utils.exceptions.ExportError: If ``records`` is empty or a
            record is not flat.
    """
    out = Path(path)
    if out.is_dir():
        out = out / DEFAULT_CSV_FILENAME
    text = records_to_csv_text(records)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    logger.debug("Wrote %d records to %s", len(records), out)
    return out


def records_to_dataframe(records: Sequence[Any]) -> Any:
    """Return flat records as a pandas DataFrame.

    Args:
        records: Non-empty sequence of dataclass instances or mappings.

    Returns:
        Pandas DataFrame with one row per record.

    Raises:
        aerosim.utils.exceptions.ConfigurationError: If pandas is not
            installed in the active environment.
        aerosim.utils.exceptions.ExportError: If ``records`` is empty or a
            record is not flat.
    """
    try:
        import pandas as pd  # type: ignore[import-untyped]
    except ModuleNotFoundError as exc:
        msg = "records_to_dataframe requires pandas. Install with `pip install pandas`."
        raise ConfigurationError(msg) from exc

    if not records:
        msg = "cannot convert an empty record sequence"
        raise ExportError(msg)
    return pd.DataFrame([_record_to_mapping(record) for record in records])


def export_result_json(result: AeroResult, path: str | Path) -> None:
    """Persist an aerodynamic result, including coefficients, as JSON.

    Args:
        result: Result returned by :func:`aerosim.aero.forces.evaluate`.
        path: Output file path for the JSON document.
    """
    payload = asdict(result)
    payload["floor_share"] = result.floor_share
    payload["efficiency"] = result.efficiency
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def export_kpi_json(kpis: AeroKpis, path: str | Path) -> None:
    """Persist KPI summary as JSON.

    Args:
        kpis: KPI dataclass returned by :func:`aerosim.analysis.kpi.compute_kpis`.
        path: Output file path for the JSON document.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(asdict(kpis), indent=2), encoding="utf-8")
