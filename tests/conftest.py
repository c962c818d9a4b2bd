# tests/conftest.py
from pathlib import Path

import pytest

from subject_spotter.config import Settings
from subject_spotter.extraction import SubjectSerializer
from subject_spotter.llm import Client


MCCLENDON = '<a id="32042656" title="McClendon, Stephen">Stephen McClendon</a>'
WALLACE = '<a id="32042657" title="Wallace, Jesse">Jesse Wallace</a>'

ANNOTATED_OUTPUT = (
    'Know all men by these presents that we '
    f'{MCCLENDON} and {WALLACE} of the County of Troup and State of Georgia '
    'are held and firmly bound unto the Confederate States of America. '
    f'Signed {MCCLENDON}.'
)


class FakeClient(Client):
    """LLM client returning a canned response and recording prompts."""

    def __init__(self, response: str, *, stream: bool = False) -> None:
        super().__init__('fake-model', stream=stream)
        self.response = response
        self.prompts: list[str] = []

    def _complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        self._emit(self.response)
        return self.response


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep tests independent of a developer's .env and of tokenizer downloads."""
    monkeypatch.setattr(Settings, 'N_CHARACTERS', 30)
    monkeypatch.setattr(Settings, 'MARKUP_PARSER', 'html.parser')
    monkeypatch.setattr(Settings, 'OUTPUT_FORMAT', 'markup')
    monkeypatch.setattr(Settings, 'PROMPT_TEMPLATE', 'template1')
    monkeypatch.setattr(Settings, 'OPENAI_ACCESS_TOKEN', None)
    monkeypatch.setattr(Settings, 'OPENAI_MODEL', None)
    monkeypatch.setattr(Settings, 'ANTHROPIC_API_KEY', None)
    monkeypatch.setattr(Settings, 'CLAUDE_MODEL', None)
    monkeypatch.setattr(Client, '_count_tokens', lambda self, text: 0)


@pytest.fixture
def annotated_output():
    return ANNOTATED_OUTPUT


@pytest.fixture
def serializer(annotated_output):
    return SubjectSerializer(raw_output=annotated_output, context_width=30)


@pytest.fixture
def fake_client():
    return FakeClient(ANNOTATED_OUTPUT)


@pytest.fixture
def input_files(tmp_path) -> tuple[Path, Path]:
    """A document text and subject listing on disk."""
    text_path = tmp_path / 'transcript.txt'
    text_path.write_text(
        'Know all men by these presents that we Stephen McClendon and Jesse Wallace '
        'of the County of Troup and State of Georgia are held and firmly bound.',
        encoding='utf-8',
    )
    listing_path = tmp_path / 'subjects.json'
    listing_path.write_text(
        '[{"id": "32042656", "name": "McClendon, Stephen"}, '
        '{"id": "32042657", "name": "Wallace, Jesse"}]',
        encoding='utf-8',
    )
    return text_path, listing_path
