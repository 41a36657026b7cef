"""Turn raw Gemini text into validated analysis models."""

import json
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from models.schemas.analysis import AnalysisResult, Profile
from services.errors import ResponseParseError

ModelT = TypeVar("ModelT", bound=BaseModel)


def extract_json_object(text: str) -> dict:
    """Decode the span from the first "{" to the last "}" of the text.

    Tolerates prose or code fences around the payload.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        raise ResponseParseError("No JSON object found in response")

    try:
        data = json.loads(text[start:end + 1])
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Invalid JSON in response: {e}") from e

    if not isinstance(data, dict):
        raise ResponseParseError("Response JSON is not an object")
    return data


def _validate(text: str, model: type[ModelT]) -> ModelT:
    data = extract_json_object(text)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ResponseParseError(
            f"Response does not match {model.__name__}: {e.error_count()} error(s)"
        ) from e


def parse_analysis(text: str) -> AnalysisResult:
    return _validate(text, AnalysisResult)


def parse_profile(text: str) -> Profile:
    return _validate(text, Profile)
