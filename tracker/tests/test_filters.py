from django.test import SimpleTestCase

from tracker.templatetags.win_filters import category_icon, category_label, char_count


class WinFilterTests(SimpleTestCase):

    def test_char_count(self):
        self.assertEqual(char_count('Shipped it'), '10/280')
        self.assertEqual(char_count(None), '0/280')

    def test_category_display(self):
        self.assertEqual(category_label('growth'), 'Growth')
        self.assertEqual(category_icon('work'), '💼')
        self.assertEqual(category_label('other'), 'other')
