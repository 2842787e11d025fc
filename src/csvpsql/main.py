from typing import List, Optional, Union

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from csvpsql.router import route
from csvpsql.utils.exceptions import CsvPsqlError

app = FastAPI(
    title="csvpsql",
    version="1.0.0"
)


class GenerateDDLRequest(BaseModel):
    """Inline csv plus run options. Server-side paths and stdin are never read."""
    model_config = ConfigDict(extra="ignore")

    content: str = Field(..., description="Delimited text to infer the table from")
    table_name: Optional[str] = Field(default=None, description="Table name")
    columns: Optional[Union[str, List[str]]] = Field(
        default=None, description="Column names, comma separated or as a list"
    )
    no_header: bool = Field(default=False, description="First row is data")
    delimiter: str = Field(default=",", description="Field delimiter")
    null_as: str = Field(default="", description="Value treated as null")


def _error_detail(error: str, message: str) -> dict:
    return {"status": "ERROR", "error": error, "message": message}


@app.exception_handler(RequestValidationError)
async def invalid_request(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    return JSONResponse(
        status_code=422,
        content={"detail": _error_detail("ConfigurationError", message)},
    )


@app.get("/health")
def health():
    return {"status": "OK"}


@app.post("/generate-ddl")
def generate_ddl(payload: GenerateDDLRequest):
    try:
        return route(payload.model_dump())
    except CsvPsqlError as e:
        # Bad input -> client error, not server crash
        raise HTTPException(
            status_code=422,
            detail=_error_detail(type(e).__name__, str(e)),
        )
