import os
from typing import Dict, Optional

import yaml

from csvpsql.router import route
from csvpsql.utils.exceptions import ConfigurationError


class ConfigExecutor:
    """
    Executes the inference pipeline using YAML configuration.

    Example:

        source:
          file_path: data/cities.csv
          delimiter: ";"
          no_header: false
          null_as: "NULL"
        table_name: cities
        columns: [city, country, population]
        output:
          file: out/cities.sql
    """

    def __init__(self, config_path: str):
        self.config_path = config_path
        self.config = self._load_config()

    # ------------------------------------------
    # Load YAML
    # ------------------------------------------
    def _load_config(self) -> Dict:
        if not os.path.exists(self.config_path):
            raise ConfigurationError(f"Config file not found: {self.config_path}")

        with open(self.config_path, "r", encoding="utf-8") as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ConfigurationError(f"Config root must be a mapping: {self.config_path}")
        return config

    # ------------------------------------------
    # Build Router Payload
    # ------------------------------------------
    def build_payload(self) -> Dict:
        cfg = self.config
        source_cfg = cfg.get("source") or {}

        return {
            "file_path": source_cfg.get("file_path"),
            "delimiter": source_cfg.get("delimiter", ","),
            "no_header": source_cfg.get("no_header", False),
            "null_as": source_cfg.get("null_as", ""),
            "table_name": cfg.get("table_name"),
            "columns": cfg.get("columns"),
        }

    @property
    def output_file(self) -> Optional[str]:
        return (self.config.get("output") or {}).get("file")

    # ------------------------------------------
    # Execute Pipeline
    # ------------------------------------------
    def execute(self) -> Dict:
        result = route(self.build_payload())
        if self.output_file:
            self._save_output(result, self.output_file)
        return result

    def _save_output(self, result: Dict, path: str) -> None:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(result["ddl"])
