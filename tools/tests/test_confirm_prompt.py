import unittest
from unittest.mock import patch
import os
import sys

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
import confirm_prompt
from rename_job import OperationCanceled

class TestConsolePrompter(unittest.TestCase):

    @patch("confirm_prompt.Prompt.ask", return_value="Y")
    def test_answer_is_lowercased(self, mock_ask):
        prompter = confirm_prompt.ConsolePrompter()
        self.assertTrue(prompter.confirm("Overwrite?"))
        self.assertEqual(mock_ask.call_args[1]["choices"], ["y", "n"])

    @patch("confirm_prompt.Prompt.ask", return_value="n")
    def test_no_is_not_confirmed(self, mock_ask):
        self.assertFalse(confirm_prompt.ConsolePrompter().confirm("Overwrite?"))

    @patch("confirm_prompt.Prompt.ask", side_effect=EOFError)
    def test_end_of_input_cancels(self, mock_ask):
        with self.assertRaises(OperationCanceled):
            confirm_prompt.ConsolePrompter().confirm("Overwrite?")

class TestScriptedPrompter(unittest.TestCase):

    def test_answers_in_order(self):
        prompter = confirm_prompt.ScriptedPrompter(["y", "N"])
        self.assertTrue(prompter.confirm("first"))
        self.assertFalse(prompter.confirm("second"))
        self.assertEqual(prompter.asked, ["first", "second"])

    def test_exhausted_cancels(self):
        with self.assertRaises(OperationCanceled):
            confirm_prompt.ScriptedPrompter().confirm("anything")

if __name__ == "__main__":
    unittest.main()
