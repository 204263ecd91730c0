"""
JSON file loading and JSON Schema validation for the installer utilities.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging

from jsonschema import Draft7Validator
from jsonschema.validators import validator_for


logger = logging.getLogger(__name__)


class JSONFileError(ValueError):
    """Raised when a JSON file cannot be read or parsed."""
    pass


class SchemaValidationError(ValueError):
    """Raised when a document does not satisfy a JSON schema."""

    def __init__(self, message: str, errors: list):
        super().__init__(message)
        self.errors = errors


def _schema_id(schema: Dict[str, Any]) -> Optional[str]:
    return schema.get('$id') or schema.get('id')


def validate(subject: Any, schema: Dict[str, Any]) -> None:
    """
    Validate an object against a JSON schema.

    Args:
        subject: Object to validate
        schema: JSON Schema to validate against

    Raises:
        SchemaValidationError: If the subject doesn't satisfy the schema
    """
    validator_class = validator_for(schema, default=Draft7Validator)
    validator = validator_class(schema)
    errors = sorted(validator.iter_errors(subject), key=lambda e: e.json_path)
    if errors:
        details = "\n".join(f"{error.json_path}: {error.message}" for error in errors)
        raise SchemaValidationError(f"Invalid JSON for the schema {_schema_id(schema)}:\n{details}", errors)


def _parse_json_file(file: Union[str, Path]) -> Any:
    try:
        with open(file, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise JSONFileError(f"Failed to parse file: {file}. {e}") from e


def parse_json_file(file: Union[str, Path], schema_file: Optional[Union[str, Path]] = None) -> Any:
    """
    Read and optionally validate a JSON file.

    Args:
        file: JSON file to read
        schema_file: Path to a JSON schema to validate the result against

    Returns:
        Parsed content of the file

    Raises:
        JSONFileError: If the file (or the schema file) is not valid JSON
        SchemaValidationError: If the content does not satisfy the schema
    """
    parsed = _parse_json_file(file)
    if schema_file:
        logger.debug(f"Validating {file} against {schema_file}")
        validate(parsed, _parse_json_file(schema_file))
    return parsed
