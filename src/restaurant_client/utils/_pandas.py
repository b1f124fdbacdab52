# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal pandas helpers"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd


def records_to_dataframe(records: List[Any]) -> pd.DataFrame:
    """Build a DataFrame from list-endpoint rows.

    Object rows become columns; scalar rows land in a single ``value`` column.
    """
    if all(isinstance(r, dict) for r in records):
        return pd.DataFrame.from_records(records)
    return pd.DataFrame({"value": records})


def dataframe_to_records(df: pd.DataFrame, na_as_null: bool = False) -> List[Dict[str, Any]]:
    """Convert a DataFrame to a list of dicts, converting Timestamps to ISO strings.

    :param df: Input DataFrame.
    :param na_as_null: When False (default), missing values are omitted from each dict.
        When True, missing values are included as None (sends null, clearing the field).
    """
    records = []
    for row in df.to_dict(orient="records"):
        clean = {}
        for k, v in row.items():
            if isinstance(v, (list, dict)) or pd.notna(v):
                if isinstance(v, pd.Timestamp):
                    v = v.isoformat()
                elif hasattr(v, "item"):
                    # numpy scalars are not JSON serializable
                    v = v.item()
                clean[k] = v
            elif na_as_null:
                clean[k] = None
        records.append(clean)
    return records
