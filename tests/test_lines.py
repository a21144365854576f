import unittest

from termwrap.error_codes import AppError
from termwrap.lines import Line, LinesIterator, wrap
from termwrap.width import display_width


SAMPLE = (
    "Ｈｅｌｌo wörld, this is   a 中文 test\nwith a supercalifragilistic word "
    "and e\u0301 combining marks.\n\nLast   paragraph."
)


class TestLiteralScenarios(unittest.TestCase):
    def test_wide_glyphs_split_at_cluster_boundary(self):
        self.assertEqual(wrap("Ｈｅｌｌo", 5), ["Ｈｅ", "ｌｌo"])

    def test_second_word_moves_to_next_line(self):
        self.assertEqual(wrap("abra a", 5), ["abra", "a"])

    def test_exact_fit_is_not_split(self):
        self.assertEqual(wrap("abra a", 6), ["abra a"])


class TestLinesIterator(unittest.TestCase):
    def test_reports_spans_and_widths(self):
        lines = list(LinesIterator("abra a", 5))
        self.assertEqual(lines, [Line(0, 4, 4), Line(5, 6, 1)])

    def test_no_tokens_no_lines(self):
        self.assertEqual(wrap("", 10), [])
        self.assertEqual(wrap("   \n\t  \n", 10), [])

    def test_newline_forces_a_break(self):
        self.assertEqual(wrap("ab\ncd", 10), ["ab", "cd"])

    def test_blank_lines_between_paragraphs(self):
        lines = list(LinesIterator("a\n\n\nb", 10))
        self.assertEqual(lines, [Line(0, 1, 1), Line(2, 2, 0), Line(3, 3, 0), Line(4, 5, 1)])

    def test_other_line_boundaries_force_breaks(self):
        self.assertEqual(wrap("ab\rcd", 10), ["ab", "cd"])
        self.assertEqual(wrap("ab\u2028cd", 10), ["ab", "cd"])
        self.assertEqual(wrap("ab\x0ccd\x85ef", 20), ["ab", "cd", "ef"])
        self.assertEqual(wrap("a\r\rb", 10), ["a", "", "b"])

    def test_wide_budget_matches_splitlines(self):
        text = "one two\rthree\x0bfour\x0c\x0cfive\x85six\u2028seven\u2029eight\x1cnine\r\nten"
        self.assertEqual(wrap(text, 80), text.splitlines())

    def test_trailing_newlines_are_trimmed(self):
        self.assertEqual(wrap("a\n\n", 10), ["a"])

    def test_whitespace_run_width_counts_inside_a_line(self):
        self.assertEqual(wrap("a   b", 4), ["a", "b"])
        self.assertEqual(wrap("a   b", 5), ["a   b"])

    def test_wide_chars_may_leave_a_column_unused(self):
        self.assertEqual(wrap("中文 中", 4), ["中文", "中"])
        self.assertEqual(wrap("中文 中", 7), ["中文 中"])
        self.assertEqual(wrap("中文中", 5), ["中文", "中"])

    def test_split_word_remainder_joins_following_words(self):
        self.assertEqual(wrap("Ｈｅｌｌo a", 7), ["Ｈｅｌ", "ｌo a"])

    def test_cluster_wider_than_line_is_forced(self):
        lines = list(LinesIterator("中", 1))
        self.assertEqual(lines, [Line(0, 1, 2, True)])

    def test_zero_width_makes_progress(self):
        lines = list(LinesIterator("ab c", 0))
        self.assertEqual([(l.start, l.end) for l in lines], [(0, 1), (1, 2), (3, 4)])
        self.assertTrue(all(l.forced for l in lines))

    def test_unsplittable_policy_without_word_breaking(self):
        text = "tiny enormousword x"
        lines = list(LinesIterator(text, 5, break_words=False))
        self.assertEqual([text[l.start:l.end] for l in lines], ["tiny", "enormousword", "x"])
        self.assertEqual([l.forced for l in lines], [False, True, False])

    def test_combining_sequence_is_never_split(self):
        self.assertEqual(wrap("e\u0301e\u0301e\u0301", 2), ["e\u0301e\u0301", "e\u0301"])

    def test_single_pass_and_not_restartable(self):
        it = LinesIterator("a b c", 1)
        self.assertIs(iter(it), it)
        self.assertEqual(next(it), Line(0, 1, 1))
        self.assertEqual(len(list(it)), 2)
        with self.assertRaises(StopIteration):
            next(it)

    def test_invalid_arguments(self):
        with self.assertRaises(AppError) as cm:
            LinesIterator("abc", -1)
        self.assertEqual(cm.exception.code, "E001")
        with self.assertRaises(AppError) as cm:
            LinesIterator(b"abc", 3)  # type: ignore[arg-type]
        self.assertEqual(cm.exception.code, "E002")


class TestProperties(unittest.TestCase):
    widths = (1, 2, 3, 5, 8, 13, 40)

    def test_width_bound(self):
        for w in self.widths:
            for line in LinesIterator(SAMPLE, w):
                content = SAMPLE[line.start:line.end]
                self.assertEqual(display_width(content), line.width)
                if not line.forced:
                    self.assertLessEqual(line.width, w, (w, content))

    def test_coverage_in_order(self):
        expected = "".join(SAMPLE.split())
        for w in self.widths:
            got = "".join("".join(s.split()) for s in wrap(SAMPLE, w))
            self.assertEqual(got, expected, w)

    def test_spans_are_ordered_and_disjoint(self):
        for w in self.widths:
            prev_end = 0
            for line in LinesIterator(SAMPLE, w):
                self.assertLessEqual(prev_end, line.start)
                self.assertLessEqual(line.start, line.end)
                prev_end = line.end


if __name__ == "__main__":
    unittest.main()
