"""Deterministic stand-ins for the model used across the test suite."""


class ScriptedInvoker:
    """Returns (or raises) the scripted responses in order and records prompts."""

    def __init__(self, responses: list[str | Exception]):
        self.responses = list(responses)
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.responses:
            raise AssertionError("ScriptedInvoker called more times than scripted")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def call_count(self) -> int:
        return len(self.prompts)
