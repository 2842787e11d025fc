import logging
from typing import Dict

from csvpsql.adapters.csv_adapter import CSVAdapter
from csvpsql.execution.inference_config import InferenceConfig
from csvpsql.inference.accumulator import ColumnAccumulator
from csvpsql.pipeline.assembler import assemble
from csvpsql.pipeline.naming import resolve_names, resolve_table_name
from csvpsql.outputs.postgres_ddl import render
from csvpsql.observability.logger import log_event, generate_request_id, RequestTimer


# ==========================================================
# ROUTER
# ==========================================================
def route(payload: Dict) -> Dict:
    """
    Main entry point shared by the CLI, config executor and API.

    Flow:
    Source -> Names -> Accumulate -> Assemble -> Render
    """

    request_id = generate_request_id()
    timer = RequestTimer()
    config = InferenceConfig.from_payload(payload)
    table_name = resolve_table_name(config.table_name, config.source_identifier)

    log_event("SCHEMA_INFERENCE_STARTED", {
        "request_id": request_id,
        "table": table_name,
        "source": config.source_identifier or ("<content>" if config.content is not None else "<stdin>"),
        "header_present": config.header_present,
        "delimiter": config.delimiter,
    })

    try:
        adapter = CSVAdapter(
            file_path=config.source_identifier,
            content=config.content,
            delimiter=config.delimiter,
            has_header=config.header_present,
        )

        with adapter.open() as source:
            # Names are settled before any data row is read
            names = resolve_names(
                config.column_name_override,
                source.header,
                source.column_count,
            )
            accumulator = ColumnAccumulator(source.column_count, config.null_sentinel)
            accumulator.consume(source.rows)

        types, constraints = accumulator.finalize()
        table = assemble(table_name, names, types, constraints)
        ddl = render(table)

    except Exception as e:
        log_event("SCHEMA_INFERENCE_FAILED", {
            "request_id": request_id,
            "table": table_name,
            "error": type(e).__name__,
            "message": str(e),
            "duration_seconds": timer.duration(),
        }, level=logging.ERROR)
        raise

    log_event("SCHEMA_INFERENCE_COMPLETED", {
        "request_id": request_id,
        "table": table.name,
        "columns": len(table.columns),
        "row_count": accumulator.row_count,
        "duration_seconds": timer.duration(),
    })

    return {
        "status": "SUCCESS",
        "request_id": request_id,
        "table": table.name,
        "columns": [c.to_dict() for c in table.columns],
        "row_count": accumulator.row_count,
        "ddl": ddl,
    }
