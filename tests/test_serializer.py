# tests/test_serializer.py
import csv
import io
import json

import pytest

from subject_spotter.config import ConfigValidationError
from subject_spotter.extraction import (
    AnnotationParser,
    MalformedInputError,
    OutputFormat,
    SubjectSerializer,
    UnsupportedFormatError,
    render,
    tabular_headers,
)


def _rows(csv_text):
    return list(csv.reader(io.StringIO(csv_text)))


def test_tabular_header_and_rows(serializer):
    rows = _rows(serializer.output(OutputFormat.TABULAR))

    assert rows[0] == [
        'Subject ID',
        'Canonical Subject Name/Title',
        'Verbatim Text',
        'Preceding 30 Characters',
        'Following 30 Characters',
        'Locator',
    ]
    assert len(rows) == 4
    assert rows[1][:3] == ['32042656', 'McClendon, Stephen', 'Stephen McClendon']
    assert rows[1] == serializer.entities()[0].to_row()


def test_tabular_header_reflects_context_width():
    assert tabular_headers(12)[3:5] == ['Preceding 12 Characters', 'Following 12 Characters']


def test_tabular_quotes_every_field(serializer):
    for line in serializer.output('csv').splitlines():
        assert line.startswith('"')
        assert line.endswith('"')


def test_tabular_escaping_round_trips():
    raw = (
        'Witness <a id="7" title="Doe, &quot;Jack&quot;">Jack "the Lad", Doe</a> '
        'and <a id="8" title="Roe">line one\nline two</a> signed'
    )
    serializer = SubjectSerializer(raw, context_width=30)
    entities = serializer.entities()

    rows = _rows(serializer.output(OutputFormat.TABULAR))

    assert rows[1] == entities[0].to_row()
    assert rows[1][1] == 'Doe, "Jack"'
    assert rows[1][2] == 'Jack "the Lad", Doe'
    assert rows[2][2] == 'line one\nline two'


def test_structured_preserves_field_order(serializer):
    listing = json.loads(serializer.output(OutputFormat.STRUCTURED))

    assert len(listing) == 3
    assert list(listing[0].keys()) == [
        'id', 'name', 'text', 'preceding_context', 'following_context', 'locator'
    ]
    assert listing[0]['preceding_context'] == 'men by these presents that we '
    assert listing[0] == serializer.entities()[0].to_dict()


def test_structured_is_pretty_printed(serializer):
    output = serializer.output('json')
    assert output.startswith('[\n  {\n    "id": "32042656",')


def test_markup_is_pretty_printed():
    serializer = SubjectSerializer('<p>Hello <a id="1" title="A">Alpha</a></p>')

    output = serializer.output(OutputFormat.MARKUP)

    assert output.startswith('<p>\n')
    assert '\n  <a id="1" title="A">\n    Alpha\n  </a>\n' in output


@pytest.mark.parametrize('fmt', list(OutputFormat))
def test_rendering_is_deterministic(annotated_output, fmt):
    first = SubjectSerializer(annotated_output).output(fmt)
    second = SubjectSerializer(annotated_output).output(fmt)
    assert first == second


@pytest.mark.parametrize('fmt', list(OutputFormat))
def test_empty_input_renders_without_error(fmt):
    serializer = SubjectSerializer('')

    assert serializer.entities() == []
    assert isinstance(serializer.output(fmt), str)


def test_empty_input_tabular_and_structured():
    serializer = SubjectSerializer('<p>no subjects</p>')

    assert _rows(serializer.output('tabular')) == [tabular_headers(30)]
    assert serializer.output('structured') == '[]'


@pytest.mark.parametrize('token', ['tsv', 'xml', '', None, 42])
def test_unsupported_format_rejected(serializer, token):
    with pytest.raises(UnsupportedFormatError) as excinfo:
        serializer.output(token)
    assert excinfo.value.format_token == token


def test_render_rejects_unsupported_format(annotated_output):
    doc = AnnotationParser.parse(annotated_output)
    with pytest.raises(UnsupportedFormatError):
        render(doc, [], 'tsv', 30)


@pytest.mark.parametrize('token, expected', [
    ('markup', OutputFormat.MARKUP),
    ('html', OutputFormat.MARKUP),
    ('CSV', OutputFormat.TABULAR),
    (' structured ', OutputFormat.STRUCTURED),
    (OutputFormat.STRUCTURED, OutputFormat.STRUCTURED),
])
def test_format_tokens(token, expected):
    assert OutputFormat.from_token(token) is expected


def test_format_extensions():
    assert [fmt.extension for fmt in OutputFormat] == ['html', 'csv', 'json']


def test_new_raw_output_invalidates_everything(serializer):
    before_entities = serializer.entities()
    before_csv = serializer.output('tabular')
    before_json = serializer.output('structured')

    serializer.set_raw_output('Then came <a id="99" title="Barr, W. A.">W. A. Barr</a> alone')

    entities = serializer.entities()
    assert [e.id for e in entities] == ['99']
    assert entities != before_entities
    assert '32042656' not in serializer.output('tabular')
    assert serializer.output('tabular') != before_csv
    assert json.loads(serializer.output('structured'))[0]['name'] == 'Barr, W. A.'
    assert serializer.output('structured') != before_json
    assert '32042656' not in serializer.output('markup')


def test_mutating_returned_entities_leaves_cache_intact():
    serializer = SubjectSerializer('<a id="1" title="A">A</a>')

    serializer.entities().clear()
    returned = serializer.entities()
    returned.append(returned[0])

    assert [e.id for e in serializer.entities()] == ['1']
    assert [item['id'] for item in json.loads(serializer.output('structured'))] == ['1']
    assert len(_rows(serializer.output('tabular'))) == 2


def test_raw_output_property_setter(serializer):
    serializer.raw_output = None

    assert serializer.raw_output == ''
    assert serializer.entities() == []


def test_non_string_raw_output_rejected(serializer):
    with pytest.raises(MalformedInputError):
        serializer.set_raw_output(b'<a id="1">bytes</a>')


def test_invalid_context_width_rejected():
    with pytest.raises(ConfigValidationError):
        SubjectSerializer('', context_width=0)
