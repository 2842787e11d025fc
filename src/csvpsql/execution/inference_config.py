from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from csvpsql.pipeline.naming import split_column_override
from csvpsql.utils.exceptions import ConfigurationError


def _optional_str(payload: Dict, key: str) -> Optional[str]:
    value = payload.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigurationError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _columns(value: Any) -> Optional[List[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        return split_column_override(value)
    if isinstance(value, (list, tuple)) and all(isinstance(c, str) for c in value):
        return list(value)
    raise ConfigurationError(
        "'columns' must be a comma separated string or a list of strings"
    )


@dataclass
class InferenceConfig:
    """
    Validated options for one schema inference run.
    """
    header_present: bool = True
    null_sentinel: str = ""
    column_name_override: Optional[List[str]] = None
    table_name: Optional[str] = None
    source_identifier: Optional[str] = None
    delimiter: str = ","
    content: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict) -> "InferenceConfig":
        no_header = payload.get("no_header", False)
        if no_header is None:
            no_header = False
        if not isinstance(no_header, bool):
            raise ConfigurationError(
                f"'no_header' must be true or false, got {no_header!r}"
            )

        null_as = payload.get("null_as")
        return cls(
            header_present=not no_header,
            null_sentinel="" if null_as is None else str(null_as),
            column_name_override=_columns(payload.get("columns")),
            table_name=_optional_str(payload, "table_name") or None,
            source_identifier=_optional_str(payload, "file_path") or None,
            delimiter=_optional_str(payload, "delimiter") or ",",
            content=_optional_str(payload, "content"),
        )
