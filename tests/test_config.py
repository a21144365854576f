import unittest

from termwrap.colors import BaseColor, Dark, Light, Rgb
from termwrap.config import Settings, env_flag
from termwrap.error_codes import AppError


class TestSettings(unittest.TestCase):
    def test_defaults(self):
        s = Settings.from_env({})
        self.assertEqual(s, Settings())
        self.assertIsNone(s.width)
        self.assertTrue(s.break_words)

    def test_values_from_env(self):
        s = Settings.from_env({
            "TERMWRAP_WIDTH": "40",
            "TERMWRAP_BREAK_WORDS": "off",
            "TERMWRAP_TAB_SIZE": "4",
            "LOG_LEVEL": "debug",
            "TERMWRAP_LOG_FILE": "/tmp/termwrap.log",
            "LOG_JSON": "yes",
        })
        self.assertEqual(s.width, 40)
        self.assertFalse(s.break_words)
        self.assertEqual(s.tab_size, 4)
        self.assertEqual(s.log_level, "DEBUG")
        self.assertEqual(s.log_file, "/tmp/termwrap.log")
        self.assertTrue(s.log_json)
        self.assertFalse(s.log_stderr)

    def test_invalid_values(self):
        for env in ({"TERMWRAP_WIDTH": "wide"}, {"TERMWRAP_WIDTH": "-3"}, {"TERMWRAP_TAB_SIZE": "0"}, {"LOG_LEVEL": "LOUD"}):
            with self.assertRaises(AppError) as cm:
                Settings.from_env(env)
            self.assertEqual(cm.exception.code, "E006")

    def test_status_colors(self):
        s = Settings.from_env({})
        self.assertEqual(s.status_fg, Dark(BaseColor.BLACK))
        self.assertEqual(s.status_bg, Dark(BaseColor.CYAN))
        s = Settings.from_env({"TERMWRAP_STATUS_FG": "light red", "TERMWRAP_STATUS_BG": "#000"})
        self.assertEqual(s.status_fg, Light(BaseColor.RED))
        self.assertEqual(s.status_bg, Rgb(0, 0, 0))

    def test_unknown_status_color(self):
        with self.assertRaises(AppError) as cm:
            Settings.from_env({"TERMWRAP_STATUS_BG": "mauve"})
        self.assertEqual(cm.exception.code, "E005")

    def test_env_flag(self):
        self.assertTrue(env_flag("ON"))
        self.assertFalse(env_flag("0"))
        self.assertTrue(env_flag(None, True))


if __name__ == "__main__":
    unittest.main()
