import unittest

from termcells.style import NULL_STYLE, Style, combine


class TestStyle(unittest.TestCase):
    def test_attributes_are_tri_state(self):
        style = Style.create(bold=True, italic=False)
        self.assertIs(style.bold, True)
        self.assertIs(style.italic, False)
        self.assertIsNone(style.underline)

    def test_unknown_attribute(self):
        with self.assertRaises(TypeError):
            Style.create(sparkle=True)

    def test_null(self):
        self.assertIs(Style.null(), NULL_STYLE)
        self.assertFalse(Style.null())
        self.assertTrue(Style.create(color="red"))
        self.assertTrue(Style.create(dim=False))

    def test_equality_and_hash(self):
        self.assertEqual(Style.create(bold=True, color="red"), Style.create(color="red", bold=True))
        self.assertNotEqual(Style.create(color="red"), Style.create(color="blue"))
        self.assertEqual(len({Style.create(bold=True), Style.create(bold=True)}), 1)

    def test_combine_right_wins(self):
        base = Style.create(bold=True, italic=True, color="red", link="https://a.example")
        top = Style.create(italic=False, underline=True, color="blue")
        combined = base + top
        self.assertIs(combined.bold, True)
        self.assertIs(combined.italic, False)
        self.assertIs(combined.underline, True)
        self.assertEqual(combined.color, "blue")
        self.assertEqual(combined.link, "https://a.example")

    def test_combine_with_none_or_null(self):
        style = Style.create(bold=True)
        self.assertIs(style.combine(None), style)
        self.assertIs(style + Style.null(), style)
        self.assertIs(Style.null() + style, style)

    def test_chain(self):
        chained = Style.chain(Style.create(bold=True), None, Style.create(color="green"))
        self.assertEqual(chained, Style.create(bold=True, color="green"))
        self.assertEqual(combine([]), NULL_STYLE)

    def test_update_link_and_without_color(self):
        style = Style.create(bold=True, color="red", bgcolor="white", link="https://a.example")
        self.assertIsNone(style.update_link(None).link)
        self.assertIs(style.update_link(None).bold, True)
        plain = style.without_color
        self.assertIsNone(plain.color)
        self.assertIsNone(plain.bgcolor)
        self.assertEqual(plain.link, "https://a.example")

    def test_str(self):
        self.assertEqual(str(Style.create(bold=True, italic=False, color="red", bgcolor="black")), "bold not italic red on black")
        self.assertEqual(str(Style()), "none")


if __name__ == "__main__":
    unittest.main()
