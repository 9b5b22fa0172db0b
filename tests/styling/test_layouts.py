import unittest

from invoice_template.styling.layouts import DEFAULT_STYLE, FOOTER_LAYOUT, TABLE_LAYOUT


def table_node(rows):
    return {'table': {'body': [['x', 'y']] * rows}}


class TestTableLayout(unittest.TestCase):

    def test_rule_only_under_header(self):
        for rows in (1, 3, 10):
            node = table_node(rows)
            self.assertEqual(TABLE_LAYOUT['hLineWidth'](1, node), 1)
            self.assertEqual(TABLE_LAYOUT['hLineWidth'](0, node), 0)
            self.assertEqual(TABLE_LAYOUT['hLineWidth'](2, node), 0)
            self.assertEqual(TABLE_LAYOUT['hLineWidth'](rows, node), 1 if rows == 1 else 0)

    def test_no_vertical_lines_or_side_padding(self):
        node = table_node(3)
        for i in range(4):
            self.assertEqual(TABLE_LAYOUT['vLineWidth'](i, node), 0)
            self.assertEqual(TABLE_LAYOUT['paddingLeft'](i, node), 0)
            self.assertEqual(TABLE_LAYOUT['paddingRight'](i, node), 0)

    def test_vertical_padding(self):
        node = table_node(3)
        self.assertEqual([TABLE_LAYOUT['paddingTop'](i, node) for i in range(3)], [5, 15, 5])
        self.assertEqual([TABLE_LAYOUT['paddingBottom'](i, node) for i in range(3)], [5, 5, 5])


class TestFooterLayout(unittest.TestCase):

    def test_rules_for_three_rows(self):
        node = table_node(3)
        widths = [FOOTER_LAYOUT['hLineWidth'](i, node) for i in range(4)]
        self.assertEqual(widths, [1, 0, 1, 1])

    def test_rules_for_single_row(self):
        node = table_node(1)
        self.assertEqual([FOOTER_LAYOUT['hLineWidth'](i, node) for i in range(2)], [1, 1])

    def test_padding_for_three_rows(self):
        node = table_node(3)
        self.assertEqual([FOOTER_LAYOUT['paddingTop'](i, node) for i in range(3)], [10, 5, 10])
        self.assertEqual([FOOTER_LAYOUT['paddingBottom'](i, node) for i in range(3)], [5, 10, 10])

    def test_no_vertical_lines_or_side_padding(self):
        node = table_node(2)
        for i in range(3):
            self.assertEqual(FOOTER_LAYOUT['vLineWidth'](i, node), 0)
            self.assertEqual(FOOTER_LAYOUT['paddingLeft'](i, node), 0)
            self.assertEqual(FOOTER_LAYOUT['paddingRight'](i, node), 0)


class TestImmutability(unittest.TestCase):

    def test_policies_are_read_only(self):
        with self.assertRaises(TypeError):
            TABLE_LAYOUT['hLineWidth'] = lambda i, node: 2
        with self.assertRaises(TypeError):
            FOOTER_LAYOUT['vLineWidth'] = lambda i, node: 2
        with self.assertRaises(TypeError):
            DEFAULT_STYLE['fontSize'] = 12


if __name__ == '__main__':
    unittest.main()
