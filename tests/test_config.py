import unittest

from adbctl.config import DEFAULT_TIMEOUT, Settings, load_settings


class TestLoadSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        self.assertEqual(load_settings({}), Settings())

    def test_debug_is_any_non_empty_value(self) -> None:
        self.assertTrue(load_settings({"DEBUG": "1"}).debug)
        self.assertTrue(load_settings({"DEBUG": "false"}).debug)
        self.assertFalse(load_settings({"DEBUG": ""}).debug)

    def test_icons_and_colors(self) -> None:
        settings = load_settings({"SHOW_ICONS": "yes", "NO_COLOR": ""})
        self.assertTrue(settings.show_icons)
        self.assertFalse(settings.color)
        self.assertFalse(load_settings({"SHOW_ICONS": "false"}).show_icons)

    def test_adb_path_and_log_file(self) -> None:
        settings = load_settings({"ADBCTL_ADB": "/opt/platform-tools/adb", "ADBCTL_DEBUG_LOG": "debug.log"})
        self.assertEqual(settings.adb_path, "/opt/platform-tools/adb")
        self.assertEqual(settings.debug_log_file, "debug.log")

    def test_timeouts(self) -> None:
        settings = load_settings({"ADBCTL_TIMEOUT": "2.5", "ADBCTL_PROBE_TIMEOUT": "10"})
        self.assertEqual(settings.command_timeout, 2.5)
        self.assertEqual(settings.probe_timeout, 10.0)

    def test_bad_timeouts_fall_back(self) -> None:
        for raw in ("abc", "0", "-3"):
            self.assertEqual(load_settings({"ADBCTL_TIMEOUT": raw}).command_timeout, DEFAULT_TIMEOUT)


if __name__ == "__main__":
    unittest.main()
