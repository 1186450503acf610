"""FastAPI application - REST surface over the test engine"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from fastapi import Body, FastAPI, Query, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from application.engine import ApiTestEngine
from application.ports.http_client import HttpClientPort
from application.ports.logger import LoggerPort
from application.ports.requests_client import RequestsSessionHttpClient
from application.ports.storage import KeyValueStorePort
from application.services.account_login import AccountLoginService
from application.services.redactor import mask_dict
from application.services.snippet_generator import SNIPPET_FORMATS, SnippetGenerator
from application.services.test_case_parser import TestCaseParser
from domain.exceptions import NotFoundError, ValidationError
from infrastructure.config.settings import Settings
from infrastructure.logging.factory import build_logger
from infrastructure.repositories import (
    AccountRepository,
    CollectionRepository,
    ConfigRepository,
    EnvironmentRepository,
    HistoryRepository,
)
from infrastructure.storage.json_file_store import JsonFileKeyValueStore


# Request models
class TestCasePayload(BaseModel):
    """Test definition. headers / body / extract / assertions may be JSON text or decoded JSON."""

    __test__ = False

    name: str = Field(default="", description="Test name")
    method: str = Field(default="GET", description="HTTP method")
    endpoint: str = Field(default="", description="Relative or absolute URL")
    headers: Union[Dict[str, Any], str, None] = Field(default=None, description="Request headers")
    body: Any = Field(default=None, description="JSON body")
    expectedStatus: Union[int, str, None] = Field(default=200, description="Expected status code")
    extract: Union[Dict[str, Any], str, None] = Field(default=None, description="Variable name -> path")
    assertions: Union[List[Dict[str, Any]], str, None] = Field(default=None, description="Assertion rules")
    accountId: Union[str, int, None] = Field(default=None, description="Account slot for the bearer token")


class CollectionCreateRequest(BaseModel):
    name: str = Field(description="Collection name")


class CollectionImportRequest(BaseModel):
    content: str = Field(description="Exported collection JSON")


class RunCollectionRequest(BaseModel):
    stop_on_failure: bool = Field(default=False, description="Stop at the first failed test")


class EnvironmentRequest(BaseModel):
    name: str = Field(default="", description="Display name")
    variables: Dict[str, Any] = Field(default_factory=dict, description="Environment variables")


class LoginRequest(BaseModel):
    email: str = Field(description="Account email")
    password: str = Field(description="Account password")


@dataclass(frozen=True)
class Services:
    logger: LoggerPort
    config: ConfigRepository
    environments: EnvironmentRepository
    accounts: AccountRepository
    collections: CollectionRepository
    history: HistoryRepository
    engine: ApiTestEngine
    login: AccountLoginService
    snippets: SnippetGenerator
    parser: TestCaseParser


def build_services(
    store: KeyValueStorePort,
    http_client: HttpClientPort,
    settings: Settings,
    logger: LoggerPort,
) -> Services:
    config = ConfigRepository(store)
    environments = EnvironmentRepository(store, config)
    accounts = AccountRepository(store)
    engine = ApiTestEngine(
        http_client=http_client,
        environment=environments,
        accounts=accounts,
        logger=logger,
        timeout_ms=settings.timeout_ms,
        inter_test_delay_ms=settings.inter_test_delay_ms,
    )
    return Services(
        logger=logger,
        config=config,
        environments=environments,
        accounts=accounts,
        collections=CollectionRepository(store, logger),
        history=HistoryRepository(store),
        engine=engine,
        login=AccountLoginService(engine, accounts, logger),
        snippets=SnippetGenerator(engine.resolve_endpoint),
        parser=TestCaseParser(),
    )


def _default_services() -> Services:
    settings = Settings.from_env()
    logger = build_logger(settings)
    return build_services(
        store=JsonFileKeyValueStore(settings.storage_dir, logger),
        http_client=RequestsSessionHttpClient(timeout_sec=settings.timeout_ms / 1000.0),
        settings=settings,
        logger=logger,
    )


# FastAPI application
app = FastAPI(
    title="API Tester",
    description="Manual HTTP API test runner",
    version="1.0.0",
)

SERVICES = _default_services()


@app.exception_handler(ValidationError)
def _validation_error(_request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
def _not_found(_request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


def _parse_test(payload: TestCasePayload, test_id: str = ""):
    return SERVICES.parser.parse_form(
        endpoint=payload.endpoint,
        method=payload.method,
        name=payload.name,
        headers=payload.headers,
        body=payload.body,
        expected_status=payload.expectedStatus,
        extract=payload.extract,
        assertions=payload.assertions,
        account_id=payload.accountId,
        test_id=test_id,
    )


@app.get("/")
def read_root():
    """Health check"""
    return {"status": "ok", "service": "apitester"}


# Collections
@app.get("/collections")
def list_collections() -> List[Dict[str, Any]]:
    return [c.to_dict() for c in SERVICES.collections.get_all()]


@app.post("/collections", status_code=201)
def create_collection(request: CollectionCreateRequest = Body(...)) -> Dict[str, Any]:
    if not request.name.strip():
        raise ValidationError("Collection name is required")
    return SERVICES.collections.add(request.name.strip()).to_dict()


@app.get("/collections/{collection_id}")
def get_collection(collection_id: str) -> Dict[str, Any]:
    return SERVICES.collections.require(collection_id).to_dict()


@app.delete("/collections/{collection_id}")
def delete_collection(collection_id: str) -> Dict[str, Any]:
    if not SERVICES.collections.delete(collection_id):
        raise NotFoundError(f"Collection not found: {collection_id}")
    return {"deleted": collection_id}


@app.post("/collections/{collection_id}/tests", status_code=201)
def add_test(collection_id: str, payload: TestCasePayload = Body(...)) -> Dict[str, Any]:
    test = _parse_test(payload)
    return SERVICES.collections.add_test(collection_id, test).to_dict()


@app.put("/collections/{collection_id}/tests/{test_id}")
def update_test(collection_id: str, test_id: str, payload: TestCasePayload = Body(...)) -> Dict[str, Any]:
    test = _parse_test(payload, test_id=test_id)
    return SERVICES.collections.update_test(collection_id, test_id, test).to_dict()


@app.delete("/collections/{collection_id}/tests/{test_id}")
def delete_test(collection_id: str, test_id: str) -> Dict[str, Any]:
    if not SERVICES.collections.delete_test(collection_id, test_id):
        raise NotFoundError(f"Test not found: {test_id}")
    return {"deleted": test_id}


@app.get("/collections/{collection_id}/export")
def export_collection(collection_id: str) -> Response:
    return Response(content=SERVICES.collections.export(collection_id), media_type="application/json")


@app.post("/collections/import", status_code=201)
def import_collection(request: CollectionImportRequest = Body(...)) -> Dict[str, Any]:
    return SERVICES.collections.import_json(request.content).to_dict()


@app.get("/collections/{collection_id}/tests/{test_id}/snippet")
def get_snippet(collection_id: str, test_id: str, format: str = Query(default="curl")) -> Dict[str, Any]:
    if format not in SNIPPET_FORMATS:
        raise ValidationError(f"Unknown snippet format: {format}")
    collection = SERVICES.collections.require(collection_id)
    for test in collection.tests:
        if test.id == test_id:
            return {"format": format, "snippet": SERVICES.snippets.generate(test, format)}
    raise NotFoundError(f"Test not found: {test_id}")


# Runs
@app.post("/collections/{collection_id}/runs")
def run_collection(collection_id: str, request: RunCollectionRequest = Body(default=RunCollectionRequest())) -> Dict[str, Any]:
    collection = SERVICES.collections.require(collection_id)
    SERVICES.config.update(active_collection=collection_id)
    summary = SERVICES.engine.run_collection(collection, stop_on_failure=request.stop_on_failure)
    return summary.to_dict()


@app.post("/tests/run")
def run_test(payload: TestCasePayload = Body(...)) -> Dict[str, Any]:
    """Run one test outside any collection and record it in history."""
    test = _parse_test(payload)
    result = SERVICES.engine.run_test(test)
    report = result.to_dict()
    SERVICES.history.add(
        {
            "endpoint": test.endpoint,
            "method": test.method,
            "testName": test.display_name,
            "result": report,
        }
    )
    return report


# Environments
@app.get("/environments")
def list_environments() -> Dict[str, Any]:
    return {
        "current": SERVICES.environments.current_id(),
        "environments": SERVICES.environments.get_all(),
    }


@app.put("/environments/{env_id}")
def put_environment(env_id: str, request: EnvironmentRequest = Body(...)) -> Dict[str, Any]:
    SERVICES.environments.set(env_id, {"name": request.name, "variables": request.variables})
    return SERVICES.environments.get(env_id) or {}


@app.delete("/environments/{env_id}")
def delete_environment(env_id: str) -> Dict[str, Any]:
    if not SERVICES.environments.delete(env_id):
        raise ValidationError(f"Environment cannot be deleted: {env_id}")
    return {"deleted": env_id}


@app.post("/environments/{env_id}/select")
def select_environment(env_id: str) -> Dict[str, Any]:
    SERVICES.environments.select(env_id)
    return {"current": env_id}


# History
@app.get("/history")
def list_history(endpoint: Optional[str] = Query(default=None)) -> List[Dict[str, Any]]:
    if endpoint:
        return SERVICES.history.get_by_endpoint(endpoint)
    return SERVICES.history.get_all()


@app.delete("/history")
def clear_history() -> Dict[str, Any]:
    SERVICES.history.clear()
    return {"cleared": True}


# Accounts
@app.get("/accounts")
def list_accounts() -> Dict[str, Any]:
    return {slot: mask_dict(account) for slot, account in SERVICES.accounts.get_all().items()}


@app.post("/accounts/{slot}/login")
def login_account(slot: str, request: LoginRequest = Body(...)) -> JSONResponse:
    outcome = SERVICES.login.login(slot, request.email, request.password)
    if not outcome.ok:
        return JSONResponse(status_code=502, content={"ok": False, "error": outcome.error})
    return JSONResponse(status_code=200, content={"ok": True, "account": mask_dict(outcome.account or {})})


@app.delete("/accounts/{slot}")
def clear_account(slot: str) -> Dict[str, Any]:
    SERVICES.accounts.clear(slot)
    return {"cleared": slot}
