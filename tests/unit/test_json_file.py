"""
Unit tests for JSON file parsing and schema validation.
"""

import json
import os
import shutil
import tempfile
from pathlib import Path

import pytest

from installer_utils.tools.json_file import (
    JSONFileError,
    SchemaValidationError,
    parse_json_file,
    validate
)


class TestParseJSONFile:
    """Test cases for parse_json_file()."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.root = Path(self.temp_dir)

    def teardown_method(self):
        """Clean up test fixtures."""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def _write(self, name: str, content) -> Path:
        path = self.root / name
        path.write_text(content if isinstance(content, str) else json.dumps(content))
        return path

    def test_parses_well_formed_file(self):
        content = [{'somecontent': 1, 'something': '2'}]
        file = self._write('file', content)

        assert parse_json_file(file) == content

    def test_parses_and_validates_against_schema(self):
        content = {'somecontent': 1, 'something': '2'}
        file = self._write('file', content)
        schema = self._write('schema', {
            'id': 'test',
            'type': 'object',
            'properties': {
                'somecontent': {'type': 'integer'},
                'something': {'type': 'string'}
            }
        })

        assert parse_json_file(str(file), schema_file=str(schema)) == content

    def test_malformed_file_raises(self):
        file = self._write('file', '[{"something"}]')

        with pytest.raises(JSONFileError, match='Failed to parse file'):
            parse_json_file(file)

    def test_missing_file_raises(self):
        with pytest.raises(JSONFileError, match='Failed to parse file'):
            parse_json_file(self.root / 'missing')

    def test_malformed_schema_raises(self):
        file = self._write('file', {'a': 1})
        schema = self._write('schema', '{not json')

        with pytest.raises(JSONFileError, match='schema'):
            parse_json_file(file, schema_file=schema)

    def test_invalid_content_for_schema_raises(self):
        file = self._write('file', {'somecontent': 1})
        schema = self._write('schema', {
            'id': 'test',
            'type': 'object',
            'properties': {
                'somecontent': {'type': 'string'}
            }
        })

        with pytest.raises(SchemaValidationError) as exc_info:
            parse_json_file(file, schema_file=schema)

        message = str(exc_info.value)
        assert message.startswith('Invalid JSON for the schema test:\n')
        assert '$.somecontent' in message
        assert "is not of type 'string'" in message


class TestValidate:
    """Test cases for validate()."""

    SCHEMA = {
        '$id': 'package',
        'type': 'object',
        'required': ['name'],
        'properties': {
            'name': {'type': 'string'},
            'version': {'type': 'integer'}
        }
    }

    def test_valid_subject(self):
        validate({'name': 'app', 'version': 2}, self.SCHEMA)

    def test_reports_every_error(self):
        with pytest.raises(SchemaValidationError, match='Invalid JSON for the schema package') as exc_info:
            validate({'version': 'two'}, self.SCHEMA)

        assert len(exc_info.value.errors) == 2
        assert "'name' is a required property" in str(exc_info.value)
