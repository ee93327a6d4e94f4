"""Thin client for code-review and test-case prompts against a local Ollama server."""

from textgen.extraction.json_array import ExtractionError, extract_test_array
from textgen.services.code_review import code_suggestions, print_code_suggestions
from textgen.services.files import load_file_to_string
from textgen.services.inference import InferenceError, OllamaChatClient, make_request
from textgen.services.test_cases import make_test_cases, print_test_cases
from textgen.services.text_generation import generate_text

__all__ = [
    "ExtractionError",
    "InferenceError",
    "OllamaChatClient",
    "code_suggestions",
    "extract_test_array",
    "generate_text",
    "load_file_to_string",
    "make_request",
    "make_test_cases",
    "print_code_suggestions",
    "print_test_cases",
]
