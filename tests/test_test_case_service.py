"""Tests for test-case generation and printing."""

from __future__ import annotations

import io
import json
import os
import unittest
from contextlib import redirect_stdout
from unittest import mock

from tests._stubs import StubChatClient, chat_reply
from textgen.config import get_settings
from textgen.services.inference import InferenceError
from textgen.services.test_cases import (
    extract_generated_test_cases,
    make_test_cases,
    print_test_cases,
)

_QUESTION = "Return the factorial of n."
_FORMAT = '{"test": [{"id": 1, "hidden": false, "input": "n", "output": "n!"}]}'


class MakeTestCasesTests(unittest.TestCase):
    def test_single_user_turn_embeds_question_format_and_count(self) -> None:
        client = StubChatClient(chat_reply("[]"))

        make_test_cases(_QUESTION, _FORMAT, 10, client=client)

        self.assertEqual(len(client.calls), 1)
        messages = client.calls[0]["messages"]
        self.assertEqual(len(messages), 1)
        self.assertEqual(messages[0]["role"], "user")
        self.assertIn(_QUESTION, messages[0]["content"])
        self.assertIn(_FORMAT, messages[0]["content"])
        self.assertIn("10", messages[0]["content"])
        self.assertIn("ONLY RETURN CODE", messages[0]["content"])

    def test_count_is_not_validated(self) -> None:
        for count in (0, -3, "many"):
            with self.subTest(count=count):
                client = StubChatClient(chat_reply("[]"))
                make_test_cases(_QUESTION, _FORMAT, count, client=client)
                content = client.calls[0]["messages"][0]["content"]
                self.assertIn(f"Generate {count} test cases", content)


class PrintTestCasesTests(unittest.TestCase):
    def tearDown(self) -> None:
        get_settings.cache_clear()

    def test_prints_full_response_then_extracted_array(self) -> None:
        reply = chat_reply('{"test": [{"id": 1, "hidden": false, "input": "3", "output": "6"}]}')
        buffer = io.StringIO()

        with redirect_stdout(buffer):
            print_test_cases(_QUESTION, _FORMAT, 1, client=StubChatClient(reply))

        expected = (
            json.dumps(reply, indent=2)
            + "\n"
            + json.dumps([{"id": 1, "hidden": False, "input": "3", "output": "6"}], indent=2)
            + "\n"
        )
        self.assertEqual(buffer.getvalue(), expected)

    def test_prints_null_when_no_array_found(self) -> None:
        buffer = io.StringIO()

        with redirect_stdout(buffer):
            with self.assertLogs("textgen.extraction.json_array", level="ERROR"):
                print_test_cases(_QUESTION, _FORMAT, 1, client=StubChatClient(chat_reply("I cannot help.")))

        self.assertTrue(buffer.getvalue().endswith("null\n"))

    def test_raises_when_no_response(self) -> None:
        buffer = io.StringIO()

        with redirect_stdout(buffer):
            with self.assertLogs("textgen.services.inference", level="ERROR"):
                with self.assertRaises(InferenceError):
                    print_test_cases(_QUESTION, _FORMAT, 3, client=StubChatClient(error="connection refused"))

        self.assertEqual(buffer.getvalue(), "")

    def test_balanced_extraction_setting(self) -> None:
        reply = chat_reply('"test": [{"id": 1, "input": [1, 2], "output": 3}]')
        with mock.patch.dict(os.environ, {"BALANCED_ARRAY_EXTRACTION": "true"}):
            get_settings.cache_clear()
            tests = extract_generated_test_cases(reply)

        self.assertEqual(tests, [{"id": 1, "input": [1, 2], "output": 3}])


if __name__ == "__main__":
    unittest.main()
