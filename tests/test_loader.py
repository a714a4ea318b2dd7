"""Tests for model document loading."""

import json
from datetime import date

import pytest

from topmodel import InvalidSchemaError, Model, ModelConfig
from topmodel.exceptions import SchemaLoadError
from topmodel.schema import FieldKind
from topmodel.schema.loader import YamlLoader, load_model_document, parse_model_document


class TestYamlLoader:
    def test_load_yaml_and_json(self, tmp_path):
        yaml_path = tmp_path / "john.yaml"
        yaml_path.write_text("firstname: John\njob:\n  title: dev\n")
        json_path = tmp_path / "john.json"
        json_path.write_text(json.dumps({"firstname": "John", "job": {"title": "dev"}}))
        loader = YamlLoader(cache_enabled=False)

        assert loader.load(yaml_path) == {"firstname": "John", "job": {"title": "dev"}}
        assert loader.load(json_path) == loader.load(yaml_path)

    def test_empty_file_is_empty_mapping(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert YamlLoader(cache_enabled=False).load(path) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaLoadError):
            YamlLoader().load(tmp_path / "nope.yaml")

    def test_parse_error(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("firstname: [John\n")
        with pytest.raises(SchemaLoadError):
            YamlLoader().load(path)

    def test_cache(self, tmp_path):
        path = tmp_path / "cached.yaml"
        path.write_text("a: 1\n")
        loader = YamlLoader(cache_enabled=True)
        assert loader.load(path) == {"a": 1}

        path.write_text("a: 2\n")
        assert loader.load(path) == {"a": 1}
        loader.clear_cache()
        assert loader.load(path) == {"a": 2}


class TestModelDocument:
    def test_load_yaml_document(self, tmp_path, model_document_yaml):
        path = tmp_path / "user.model.yaml"
        path.write_text(model_document_yaml)
        document = load_model_document(path)

        assert document.table == "users"
        assert document.schema["born"].kind is FieldKind.DATE
        assert document.schema["job"].sub["title"].required is True
        assert document.exposer["public"] == ("firstname", "job.title")

    def test_load_json_document(self, tmp_path):
        path = tmp_path / "user.model.json"
        path.write_text(json.dumps({"schema": {"firstname": "string"}}))
        document = load_model_document(path)

        assert list(document.schema) == ["firstname"]
        assert document.exposer is None
        assert document.table is None

    def test_config_from_file(self, tmp_path, model_document_yaml):
        path = tmp_path / "user.model.yaml"
        path.write_text(model_document_yaml)
        config = ModelConfig.from_file(path)

        model = Model({"firstname": "John", "born": date(1990, 5, 17), "job": {"title": "dev"}}, config)
        assert model.validation.values["tags"] == []
        assert model.expose("public") == {"firstname": "John", "job": {"title": "dev"}}
        assert config.table == "users"

    def test_structure_errors_reported_with_path(self):
        with pytest.raises(SchemaLoadError) as exc_info:
            parse_model_document(
                {"schema": {"firstname": {"kind": "string", "required": "yes"}}, "extra": 1}
            )
        message = str(exc_info.value)
        assert "path=/schema/firstname" in message
        assert "extra" in message

    def test_unknown_kind_in_document(self):
        with pytest.raises(InvalidSchemaError) as exc_info:
            parse_model_document({"schema": {"job": {"kind": "object", "sub": {"title": "strng"}}}})
        assert exc_info.value.field == "job.title"

    def test_document_must_be_mapping(self):
        with pytest.raises(SchemaLoadError):
            parse_model_document(["firstname"])
