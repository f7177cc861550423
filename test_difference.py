import difference
import levenshtein
import unittest


from difference import Delimiter, DisplayOptions, Kept, ShortenOptions
from edit_operation import Delete, Insert, Keep, Substitute


class DifferenceTestCase(unittest.TestCase):

    def test_display_diffs(self):
        options = difference.default_display_options()
        cases = (
            ('hello', 'hey', 'he[-l-l~o/y]'),
            ('abc', 'abc', 'abc'),
            ('', 'abc', '[+a+b+c]'),
            ('abc', '', '[-a-b-c]'),
            ('', '', ''),
            ('aaa', 'aba', 'a[~a/b]a'),
        )
        for source, target, expected in cases:
            operations = levenshtein.diff(source, target)
            self.assertEqual(difference.display_diffs(options, operations),
                    expected, (source, target))

    def test_separators(self):
        options = DisplayOptions(separators=difference.parens_separators())
        operations = [Keep('a'), Insert('b'), Keep('c'), Delete('d')]
        self.assertEqual(difference.display_diffs(options, operations),
                'a(+b)c(-d)')
        options = DisplayOptions(separators=difference.make_char_separators('|', '|'))
        self.assertEqual(difference.display_diffs(options, operations),
                'a|+b|c|-d|')

    def test_shortening(self):
        options = DisplayOptions(shorten_options=ShortenOptions(5, '...'))
        source = 'a' * 30 + 'x' + 'b' * 30
        target = 'a' * 30 + 'y' + 'b' * 30
        self.assertEqual(
            difference.display_diffs(options, levenshtein.diff(source, target)),
            '...aaaaa[~x/y]bbbbb...',
        )
        source = 'x' + 'a' * 20 + 'x'
        target = 'y' + 'a' * 20 + 'y'
        self.assertEqual(
            difference.display_diffs(options, levenshtein.diff(source, target)),
            '[~x/y]aaaaa...aaaaa[~x/y]',
        )
        # Short runs and unchanged text are left alone
        self.assertEqual(
            difference.display_diffs(options, levenshtein.diff('ab' * 10, 'ab' * 10)),
            'ab' * 10,
        )
        self.assertEqual(
            difference.display_diffs(options, levenshtein.diff('abcxdef', 'abcydef')),
            'abc[~x/y]def',
        )

    def test_shorten_tokens(self):
        start = Delimiter('[')
        end = Delimiter(']')
        tokens = [Kept('abcdef'), start, Kept('+['), end, Kept('ghijkl')]
        self.assertEqual(
            difference.shorten_tokens(ShortenOptions(2, '..'), start, end, tokens),
            [Kept('..ef'), start, Kept('+['), end, Kept('gh..')],
        )

    def test_colored(self):
        display = difference.colored_display_edit_operation
        self.assertEqual(display(Insert('a')), '\033[32ma\033[0m')
        self.assertEqual(display(Delete('a')), '\033[31ma\033[0m')
        self.assertEqual(display(Substitute('a', 'b')), '\033[36ma\033[0m')
        self.assertEqual(display(Keep('a')), 'a')
        options = DisplayOptions(display_edit_operation=display)
        self.assertEqual(
            difference.display_diffs(options, [Keep('a'), Delete('b')]),
            'a[\033[31mb\033[0m]',
        )
