from .input_guard import InputGuard, validate_model_name
from .comparison_agent import ComparisonAgent
from .response_parser import ResponseParser, extract_json

__all__ = [
    "InputGuard",
    "validate_model_name",
    "ComparisonAgent",
    "ResponseParser",
    "extract_json",
]
