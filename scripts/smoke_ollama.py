"""Run real code-review and test-case calls against a local Ollama server.

Usage (from repo root, with the package installed):
    python scripts/smoke_ollama.py
    python scripts/smoke_ollama.py --question q.txt --format fmt.json --code sample.py --count 5
"""

from __future__ import annotations

import argparse
import logging

from textgen.services.code_review import print_code_suggestions
from textgen.services.files import load_file_to_string
from textgen.services.test_cases import print_test_cases

_DEMO_QUESTION = "Given an array of integers, return the indices of two numbers that add up to a target."
_DEMO_FORMAT = '{"test": [{"id": 1, "hidden": false, "input": {"nums": [2, 7], "target": 9}, "output": [0, 1]}]}'
_DEMO_CODE = """def two_sum(nums, target):
    for i in range(len(nums)):
        for j in range(len(nums)):
            if nums[i] + nums[j] == target:
                return [i, j]
"""


def _read_or_default(path: str | None, default: str) -> str:
    if not path:
        return default
    contents = load_file_to_string(path)
    if contents is None:
        raise SystemExit(f"could not read {path}")
    return contents


def main() -> None:
    parser = argparse.ArgumentParser(description="Smoke test against a local Ollama server")
    parser.add_argument("--question", help="file holding the problem statement")
    parser.add_argument("--format", dest="format_template", help="file holding the JSON output template")
    parser.add_argument("--code", help="file holding code to review")
    parser.add_argument("--language", default="Python")
    parser.add_argument("--focus", default="error checking")
    parser.add_argument("--count", default="10")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    print_code_suggestions(_read_or_default(args.code, _DEMO_CODE), args.focus, args.language)
    print_test_cases(
        _read_or_default(args.question, _DEMO_QUESTION),
        _read_or_default(args.format_template, _DEMO_FORMAT),
        args.count,
    )


if __name__ == "__main__":
    main()
