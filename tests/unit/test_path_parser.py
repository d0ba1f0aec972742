import pytest

from valuestore_lib.storage.path import Key, Index, Segment, parse_path, format_path, as_segments


def test_path_segments_are_typed():
    parsed = parse_path('values.0.scores[5].value')
    assert len(parsed) == 5
    assert isinstance(parsed[0], Key)    # values
    assert isinstance(parsed[1], Index)  # 0
    assert isinstance(parsed[2], Key)    # scores
    assert isinstance(parsed[3], Index)  # 5
    assert isinstance(parsed[4], Key)    # value


def test_dot_and_bracket_indexes_are_identical():
    assert parse_path('a.b[0].c') == [Key('a'), Key('b'), Index(0), Key('c')]
    assert parse_path('a.b.0.c') == parse_path('a.b[0].c')


def test_leading_index_and_leading_zeros():
    assert parse_path('0.name') == [Index(0), Key('name')]
    assert parse_path('items.01') == [Key('items'), Index(1)]


def test_alphanumeric_segments_stay_keys():
    assert parse_path('2025report.total') == [Key('2025report'), Key('total')]


def test_keys_may_contain_spaces():
    assert parse_path('hobbies[3].Fun Projects.1') == [
        Key('hobbies'), Index(3), Key('Fun Projects'), Index(1),
    ]


def test_malformed_tokens_are_skipped():
    assert parse_path('a..b') == [Key('a'), Key('b')]
    assert parse_path('a[x].b') == [Key('a'), Key('x'), Key('b')]
    assert parse_path('') == []
    assert parse_path('[]') == []
    assert parse_path('...') == []


def test_segment_key_values():
    assert Key('name').key == 'name'
    assert Index(3).key == 3


def test_format_path_renders_indexes_in_brackets():
    assert format_path(parse_path('x.y.0.z')) == 'x.y[0].z'
    assert format_path([]) == ''


def test_as_segments_accepts_parsed_paths():
    segs = [Key('a'), Index(2)]
    assert as_segments(segs) == segs
    assert as_segments('a[2]') == segs


def test_only_ascii_digits_make_indexes():
    assert parse_path('scores.٣') == [Key('scores'), Key('٣')]
    assert parse_path('a[٣]') == [Key('a'), Key('٣')]
    assert parse_path('a.1\n.b') == [Key('a'), Key('1\n'), Key('b')]


def test_segment_base_is_abstract():
    with pytest.raises(TypeError):
        Segment()
