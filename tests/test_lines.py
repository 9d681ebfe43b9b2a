"""
Tests for line splitting and the four-way classification.
"""
import pytest

from pyknytt.ini.lines import IniLine, LineKind, classify, split_lines


class TestSplitLines:
    def test_all_terminators_are_equivalent(self):
        assert split_lines('a\r\nb\rc\nd') == ['a', 'b', 'c', 'd']

    def test_no_terminator_needed_on_last_line(self):
        assert split_lines('a=1') == ['a=1']

    def test_trailing_terminator_leaves_empty_line(self):
        assert split_lines('a\r\n') == ['a', '']

    def test_lf_cr_is_two_terminators(self):
        assert split_lines('a\n\rb') == ['a', '', 'b']

    def test_other_separators_do_not_split(self):
        assert split_lines('a\x0bb\x0cc\x1cd') == ['a\x0bb\x0cc\x1cd']


class TestClassify:
    @pytest.mark.parametrize('line', [';comment', '   ; indented', '# hash'])
    def test_comments(self, line):
        assert classify(line).kind is LineKind.COMMENT

    def test_hash_comment_with_equal_sign(self):
        assert classify('#Key=Value').kind is LineKind.COMMENT

    def test_section(self):
        assert classify('[World]') == IniLine(LineKind.SECTION, 'World')

    def test_section_keeps_interior_whitespace(self):
        assert classify('  [ A  B ]  ') == IniLine(LineKind.SECTION, ' A  B ')

    def test_empty_section(self):
        assert classify('[]') == IniLine(LineKind.SECTION, '')

    def test_section_spans_to_last_bracket(self):
        assert classify('[a]b]').key == 'a]b'

    @pytest.mark.parametrize('line', [
        '[Foo', '[Foo] extra', '[', '[Foo=Bar', '[Foo] ;comment'])
    def test_malformed_headers_are_ignorable(self, line):
        assert classify(line).kind is LineKind.IGNORABLE

    @pytest.mark.parametrize('line', ['', '   ', '\t \t', 'random text'])
    def test_ignorable(self, line):
        assert classify(line).kind is LineKind.IGNORABLE

    def test_property(self):
        assert classify('Name=Hello') == IniLine(
            LineKind.PROPERTY, 'Name', 'Hello')

    def test_property_splits_on_first_equal_sign(self):
        assert classify(' Key = a = b ') == IniLine(
            LineKind.PROPERTY, 'Key', 'a = b')

    def test_property_trims_tabs(self):
        assert classify('\tKey\t=\tValue\t') == IniLine(
            LineKind.PROPERTY, 'Key', 'Value')

    def test_property_keeps_non_ascii_spaces(self):
        assert classify('Key=\xa0v') == IniLine(
            LineKind.PROPERTY, 'Key', '\xa0v')

    @pytest.mark.parametrize('line, key, value', [
        ('Key=', 'Key', ''),
        ('=Value', '', 'Value'),
        ('=', '', ''),
        ('Key ; not a comment = x', 'Key ; not a comment', 'x'),
    ])
    def test_property_edge_cases(self, line, key, value):
        assert classify(line) == IniLine(LineKind.PROPERTY, key, value)
