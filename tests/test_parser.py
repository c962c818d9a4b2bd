# tests/test_parser.py
import pytest

from subject_spotter.extraction import AnnotationParser, EntityRecord

from conftest import MCCLENDON


def _extract(raw, width=30):
    return AnnotationParser.extract_entities(AnnotationParser.parse(raw), width)


def test_first_record_field_fidelity(annotated_output):
    entities = _extract(annotated_output)

    first = entities[0]
    assert first.id == '32042656'
    assert first.name == 'McClendon, Stephen'
    assert first.text == 'Stephen McClendon'
    assert first.preceding_context == 'men by these presents that we '
    assert first.following_context == ' and <a id="32042657" title="W'
    assert len(first.preceding_context) == 30
    assert len(first.following_context) == 30


def test_entities_follow_document_order(annotated_output):
    entities = _extract(annotated_output)

    assert [e.id for e in entities] == ['32042656', '32042657', '32042656']
    assert entities[1].name == 'Wallace, Jesse'
    assert entities[1].text == 'Jesse Wallace'


def test_locator_concatenates_every_occurrence_of_the_id(annotated_output):
    entities = _extract(annotated_output)

    assert entities[0].locator == MCCLENDON + MCCLENDON
    assert entities[2].locator == MCCLENDON + MCCLENDON
    assert entities[1].locator == '<a id="32042657" title="Wallace, Jesse">Jesse Wallace</a>'


def test_identical_annotations_share_first_occurrence_context(annotated_output):
    entities = _extract(annotated_output)

    assert entities[2].preceding_context == entities[0].preceding_context
    assert entities[2].following_context == entities[0].following_context


def test_no_annotations_yields_empty_list():
    assert _extract('<p>Nothing to see here.</p>') == []
    assert _extract('') == []
    assert _extract(None) == []


def test_context_clipped_at_document_start_and_end():
    at_start = _extract('<a id="1" title="Alpha">Alpha</a> and the rest of a long sentence')[0]
    assert at_start.preceding_context == ''
    assert at_start.following_context == ' and the rest of a long senten'

    at_end = _extract('short <a id="1" title="Alpha">Alpha</a>')[0]
    assert at_end.preceding_context == 'short '
    assert at_end.following_context == ''


def test_context_width_is_respected(annotated_output):
    first = _extract(annotated_output, width=5)[0]

    assert first.preceding_context == 't we '
    assert first.following_context == ' and '


def test_missing_attributes_become_empty_strings():
    entity = _extract('before <a>plain</a> after')[0]

    assert entity == EntityRecord(
        id='',
        name='',
        text='plain',
        preceding_context='before ',
        following_context=' after',
        locator='',
    )


def test_text_is_stripped():
    entity = _extract('<a id="1" title="Alpha">  Alpha\n </a>')[0]
    assert entity.text == 'Alpha'


def test_malformed_markup_is_recovered():
    entities = _extract('<p>unclosed <a id="9" title="Nine">Nine')

    assert len(entities) == 1
    assert entities[0].id == '9'
    assert entities[0].text == 'Nine'


def test_reply_cut_off_inside_a_tag_keeps_complete_annotations():
    truncated = f'Know all men by these presents that we {MCCLENDON} and <a id="32042657" title'

    entities = _extract(truncated)

    assert entities[0].id == '32042656'
    assert entities[0].text == 'Stephen McClendon'
    assert entities[0].preceding_context == 'men by these presents that we '
    assert all(e.text != 'Jesse Wallace' for e in entities)


@pytest.mark.parametrize('width', [0, -3, '30', 2.5, True])
def test_invalid_context_width_rejected(width):
    doc = AnnotationParser.parse('<a id="1" title="A">A</a>')
    with pytest.raises(ValueError):
        AnnotationParser.extract_entities(doc, width)


def test_locate_unknown_id_is_empty(annotated_output):
    doc = AnnotationParser.parse(annotated_output)
    assert AnnotationParser.locate(doc, 'missing') == ''
