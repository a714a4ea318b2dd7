import logging

import pytest

from topmodel import ExposerMap, ModelConfig, SchemaDefinition
from topmodel.adapters import MemoryAdapter


@pytest.fixture(autouse=True)
def reset_topmodel_logging():
    """Drop console handlers set_logging attaches, they hold the captured streams."""
    yield
    logger = logging.getLogger("topmodel")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def user_schema() -> SchemaDefinition:
    return SchemaDefinition(
        {
            "id": {"kind": "number"},
            "firstname": {"kind": "string", "required": True},
            "lastname": {"kind": "string"},
            "active": {"kind": "boolean", "default": True},
            "tags": {"kind": "array", "default": list},
            "job": {
                "kind": "object",
                "sub": {
                    "title": {"kind": "string", "required": True},
                    "company": {"kind": "string", "default": "ACME"},
                },
            },
        }
    )


@pytest.fixture
def user_exposer() -> ExposerMap:
    return ExposerMap(
        {
            "public": ["id"],
            "profile": ["firstname", "lastname", "job.title"],
        }
    )


@pytest.fixture
def memory_db() -> MemoryAdapter:
    return MemoryAdapter()


@pytest.fixture
def user_config(user_schema, user_exposer, memory_db) -> ModelConfig:
    return ModelConfig(schema=user_schema, exposer=user_exposer, db=memory_db, table="users")


@pytest.fixture
def model_document_yaml() -> str:
    return (
        "table: users\n"
        "schema:\n"
        "  firstname: {kind: string, required: true}\n"
        "  born: date\n"
        "  tags: {kind: array, default: []}\n"
        "  job:\n"
        "    kind: object\n"
        "    sub:\n"
        "      title: {kind: string, required: true}\n"
        "exposer:\n"
        "  public: [firstname, job.title]\n"
    )
