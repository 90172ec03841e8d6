"""Test CSS errors and warnings."""

import pytest

from flatcss import DeclarationParseError, transform

from ..testing_utils import assert_no_logs, capture_logs


@assert_no_logs
@pytest.mark.parametrize('source, message', (
    ('.test { margin: 10; }', 'Failed to parse declaration "margin: 10"'),
    ('.test { flex: 1 2px 3; }',
     'Failed to parse declaration "flex: 1 2px 3"'),
    ('.test { font-family: Goudy Bookletter 1911; }',
     'Failed to parse declaration "fontFamily: Goudy Bookletter 1911"'),
    ('.test { text-decoration: underline red yellow; }',
     'Failed to parse declaration '
     '"textDecoration: underline red yellow"'),
    ('.test { box-shadow: red; }',
     'Failed to parse declaration "boxShadow: red"'),
    ('.test { box-shadow: 0 0 0 red yellow green blue; }',
     'Failed to parse declaration '
     '"boxShadow: 0 0 0 red yellow green blue"'),
    ('.test { box-shadow: 10px; }',
     'Failed to parse declaration "boxShadow: 10px"'),
    ('.test { box-shadow: 10 20px 30px #f00; }',
     'Failed to parse declaration "boxShadow: 10 20px 30px #f00"'),
    ('.test { box-shadow: 10px 20; }',
     'Failed to parse declaration "boxShadow: 10px 20"'),
    ('.test { box-shadow: 20; }',
     'Failed to parse declaration "boxShadow: 20"'),
    ('.test { text-shadow: red; }',
     'Failed to parse declaration "textShadow: red"'),
    ('.test { text-shadow: 10px red; }',
     'Failed to parse declaration "textShadow: 10px red"'),
    ('.test { border-top-left-radius: 10; }',
     'Failed to parse declaration "borderTopLeftRadius: 10"'),
    ('.test { Margin-Top: 10 ; }',
     'Failed to parse declaration "marginTop: 10"'),
))
def test_declaration_errors(source, message):
    with pytest.raises(DeclarationParseError) as exc_info:
        transform(source)
    assert str(exc_info.value) == message


@assert_no_logs
def test_declaration_error_attributes():
    with pytest.raises(DeclarationParseError) as exc_info:
        transform('.test { color: blue } .other { border: 1px 2px }')
    error = exc_info.value
    assert isinstance(error, ValueError)
    assert error.name == 'border'
    assert error.value == '1px 2px'
    assert error.reason == 'got multiple width values in a border shorthand'


@assert_no_logs
def test_declaration_error_unsupported_selector():
    with pytest.raises(DeclarationParseError) as exc_info:
        transform('div { margin: 10 }')
    assert str(exc_info.value) == 'Failed to parse declaration "margin: 10"'


@assert_no_logs
def test_declaration_error_media_queries():
    source = '@media (min-width: 100px) { .test { margin: 10 } }'
    assert transform(source) == {}
    with pytest.raises(DeclarationParseError) as exc_info:
        transform(source, parse_media_queries=True)
    assert str(exc_info.value) == 'Failed to parse declaration "margin: 10"'


@assert_no_logs
@pytest.mark.parametrize('source, messages', (
    ('div { color: red }', ['WARNING: Invalid or unsupported selector', 'div']),
    ('#id { color: red }', ['WARNING: Invalid or unsupported selector']),
    ('.a .b { color: red }', ['WARNING: Invalid or unsupported selector']),
    ('.a:hover { color: red }', ['WARNING: Invalid or unsupported selector']),
    ('. { color: red }', ['WARNING: Invalid or unsupported selector']),
    ('@import "style.css";', ['WARNING: Unsupported @import rule']),
    ('@font-face { font-family: test }',
     ['WARNING: Unsupported @font-face rule']),
    ('@media print;', ['WARNING: Empty @media rule']),
))
def test_warnings(source, messages):
    with capture_logs() as logs:
        transform(source)
    assert len(logs) == 1, source
    for message in messages:
        assert message in logs[0]


@assert_no_logs
def test_warnings_keep_supported_selectors():
    with capture_logs() as logs:
        styles = transform('.a, div, .b { color: red }')
    assert len(logs) == 1
    assert styles == {'a': {'color': 'red'}, 'b': {'color': 'red'}}


@assert_no_logs
@pytest.mark.parametrize('source, message, reason', (
    ('.test { color red; color: blue }',
     'Failed to parse declaration "color red"', ''),
    ('.test { margin 10; color: red }',
     'Failed to parse declaration "margin 10"', ''),
    ('.test { color: blue; .nested { color: red } }',
     'Failed to parse declaration ".nested { color: red }"',
     'nested rules are not supported'),
))
def test_declaration_error_syntax(source, message, reason):
    with pytest.raises(DeclarationParseError) as exc_info:
        transform(source)
    error = exc_info.value
    assert str(error) == message
    assert error.name is None
    assert reason in error.reason


@assert_no_logs
def test_declaration_error_stylesheet_syntax():
    with pytest.raises(DeclarationParseError) as exc_info:
        transform('.a { color: red } .b')
    error = exc_info.value
    assert str(error).startswith('Failed to parse declaration ')
    assert error.name is None
    assert error.reason


@assert_no_logs
def test_warnings_rule_syntax():
    with capture_logs() as logs:
        styles = transform('.test { color: blue } { color: red }')
    assert styles == {'test': {'color': 'blue'}}
    assert len(logs) == 1
    assert 'WARNING: Invalid or unsupported selector' in logs[0]


@assert_no_logs
def test_warnings_nested_media_queries():
    with capture_logs() as logs:
        styles = transform('''
          @media screen {
            .a { top: 1px }
            @media print { .a { top: 2px } }
          }
        ''', parse_media_queries=True)
    assert styles == {'@media screen': {'a': {'top': 1}}}
    assert len(logs) == 1
    assert 'WARNING: Nested @media rule ' in logs[0]


@assert_no_logs
@pytest.mark.parametrize('options, message', (
    ({'parseMediaQueries': True},
     'WARNING: Unknown option: parseMediaQueries, '
     'did you mean parse_media_queries?'),
    ({'media': True}, 'WARNING: Unknown option: media.'),
))
def test_warnings_unknown_option(options, message):
    with capture_logs() as logs:
        styles = transform('.test { color: blue }', **options)
    assert styles == {'test': {'color': 'blue'}}
    assert logs == [message]
