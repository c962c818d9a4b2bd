# tests/test_engine.py
import json

import pytest

from subject_spotter.extraction import OutputFormat, UnsupportedFormatError
from subject_spotter.io import ContentLoadError
from subject_spotter.llm import LLMClientError
from subject_spotter.pipeline import Engine
from subject_spotter.pipeline import engine as engine_module

from conftest import ANNOTATED_OUTPUT, FakeClient


@pytest.fixture
def engine(input_files, fake_client):
    text_path, listing_path = input_files
    return Engine(
        str(text_path),
        str(listing_path),
        user_context='Bond dated 1864',
        llm_client=fake_client,
        output_format='tabular',
    )


def test_process_sends_prompt_and_keeps_raw_output(engine, fake_client):
    raw_output = engine.process()

    assert raw_output == ANNOTATED_OUTPUT
    assert engine.raw_output == ANNOTATED_OUTPUT
    assert len(fake_client.prompts) == 1
    prompt = fake_client.prompts[0]
    assert 'Stephen McClendon and Jesse Wallace' in prompt
    assert '"McClendon, Stephen"' in prompt
    assert 'Bond dated 1864' in prompt


def test_serialize_uses_default_and_requested_formats(engine):
    engine.process()

    assert engine.output_format is OutputFormat.TABULAR
    assert engine.serialize().startswith('"Subject ID"')
    listing = json.loads(engine.serialize('structured'))
    assert [item['id'] for item in listing] == ['32042656', '32042657', '32042656']
    assert [e.id for e in engine.entities()] == ['32042656', '32042657', '32042656']


def test_serialize_before_process_is_empty(engine):
    assert engine.entities() == []
    assert engine.serialize('structured') == '[]'


def test_setting_raw_output_directly(engine, fake_client):
    engine.raw_output = '<a id="5" title="Five">five</a>'

    assert [e.name for e in engine.entities()] == ['Five']
    assert fake_client.prompts == []


def test_setters_invalidate_prompt(engine, input_files, tmp_path):
    first = engine.prompt

    engine.user_context = 'Troup County records'
    assert 'Troup County records' in engine.prompt
    assert engine.prompt != first

    engine.prompt_template = 'template2'
    assert engine.prompt.startswith('Annotate the historical document')

    other_text = tmp_path / 'other.txt'
    other_text.write_text('An entirely different transcript.', encoding='utf-8')
    engine.text_path = str(other_text)
    assert engine.text == 'An entirely different transcript.'
    assert 'An entirely different transcript.' in engine.prompt


def test_llm_service_change_recreates_client(engine, monkeypatch):
    created = []

    def fake_factory(service, *, stream):
        created.append((service, stream))
        return FakeClient('<a id="1" title="One">one</a>')

    monkeypatch.setattr(engine_module, 'create_llm_client', fake_factory)
    engine.llm_service = 'claude'

    engine.process()

    assert created == [('claude', True)]
    assert [e.id for e in engine.entities()] == ['1']


def test_missing_input_raises(tmp_path, fake_client, input_files):
    _, listing_path = input_files
    engine = Engine(str(tmp_path / 'missing.txt'), str(listing_path), llm_client=fake_client)

    with pytest.raises(ContentLoadError):
        engine.process()
    assert fake_client.prompts == []


def test_unconfigured_service_raises(input_files):
    text_path, listing_path = input_files
    engine = Engine(str(text_path), str(listing_path), llm_service='openai')

    with pytest.raises(LLMClientError):
        engine.process()


def test_unsupported_output_format_rejected(input_files):
    text_path, listing_path = input_files
    with pytest.raises(UnsupportedFormatError):
        Engine(str(text_path), str(listing_path), output_format='tsv')
