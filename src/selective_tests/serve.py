import logging
from fastapi import Depends, FastAPI, HTTPException
from pydantic import ValidationError
from selective_tests.config import SelectorConfig
from selective_tests.errors import SelectionError
from selective_tests.schema import SelectionRequest, SelectionResponse
from selective_tests.select_tests import read_tests_to_run
from selective_tests.storage import fetch_statistics

logger = logging.getLogger(__name__)

app = FastAPI(title="Selective Tests")

def get_config():
    try:
        return SelectorConfig.from_env()
    except ValidationError as err:
        logger.error(f"invalid selector configuration: {err}")
        raise HTTPException(500, f"invalid selector configuration: {err}") from err

def get_fetcher():
    return fetch_statistics

@app.get("/health")
def health():
    return {"status": "ok"}

@app.post("/select", response_model=SelectionResponse)
def select(req: SelectionRequest, config=Depends(get_config), fetch=Depends(get_fetcher)):
    tests = req.tests
    try:
        count = read_tests_to_run(tests, req.cloud, req.suite, config=config, fetch=fetch)
    except SelectionError as err:
        # selection unavailable: nothing was skipped, run everything
        return SelectionResponse(selected_count=err.selected_count, tests=tests, error=str(err))
    return SelectionResponse(selected_count=count, tests=tests)
