import unittest

from adbctl.adb import TIMED_OUT
from adbctl.config import Settings
from adbctl.presenter import format_memory_report, format_report, parse_report, strip_ansi
from adbctl.report import PROPERTY_QUERIES, DeviceInfo

SAMPLE = [
    DeviceInfo("Model", "Pixel 7"),
    DeviceInfo("Manufacturer", "Google"),
    DeviceInfo("Android Version", "14"),
    DeviceInfo("CPU", "8 cores (3.00% used)"),
    DeviceInfo("Memory", "n/a"),
    DeviceInfo("Screen Resolution", "Physical size: 1080x2400"),
    DeviceInfo("Battery Level", "87"),
]

MEMINFO = "MemTotal: 1048576 kB\nMemFree: 262144 kB\nMemAvailable: 524288 kB\nCached: 2048 kB\n"


class TestFormatReport(unittest.TestCase):
    def test_round_trip_plain(self) -> None:
        text = format_report(SAMPLE, Settings(color=False))
        self.assertEqual(parse_report(text), SAMPLE)

    def test_round_trip_with_colors_and_icons(self) -> None:
        text = format_report(SAMPLE, Settings(color=True, show_icons=True))
        self.assertIn("\x1b[", text)
        self.assertEqual(parse_report(text), SAMPLE)

    def test_layout(self) -> None:
        text = format_report(SAMPLE, Settings(color=False))
        lines = text.splitlines()
        self.assertEqual(lines[0], "Device Information")
        self.assertEqual(lines[1], "=" * 70)
        self.assertIn("[ Device ]", lines)
        self.assertIn(f"{'':<3} {'Model':<20} : Pixel 7", lines)
        self.assertNotIn("[ Network ]", lines)

    def test_groups_follow_fixed_order(self) -> None:
        shuffled = [SAMPLE[-1], SAMPLE[3], SAMPLE[0]]
        labels = [e.label for e in parse_report(format_report(shuffled, Settings(color=False)))]
        self.assertEqual(labels, ["Model", "CPU", "Battery Level"])

    def test_unknown_labels_go_to_other(self) -> None:
        text = format_report([DeviceInfo("Uptime", "3 days")], Settings(color=False))
        self.assertIn("[ Other ]", text)
        self.assertEqual(parse_report(text), [DeviceInfo("Uptime", "3 days")])

    def test_multi_line_values_round_trip(self) -> None:
        info = [
            DeviceInfo("Screen Resolution", "Physical size: 1920x1080\nOverride size: 1280x720"),
            DeviceInfo("Screen Density", "Physical density: 320"),
        ]
        for settings in (Settings(color=False), Settings(color=True, show_icons=True)):
            text = format_report(info, settings)
            self.assertEqual(parse_report(text), info)
        self.assertIn(f"\n{' ' * 27}Override size: 1280x720\n", format_report(info, Settings(color=False)))

    def test_full_table_keeps_query_order(self) -> None:
        info = [DeviceInfo(q.label, "n/a") for q in PROPERTY_QUERIES]
        self.assertEqual(parse_report(format_report(info, Settings(color=False))), info)


class TestMemoryReport(unittest.TestCase):
    def test_highlighted_and_computed_fields(self) -> None:
        text = format_memory_report(MEMINFO, Settings(color=False))
        self.assertTrue(text.startswith("Detailed Memory Information\n"))
        self.assertIn(f"{'Total RAM':<20} : 1024.00 MB", text)
        self.assertIn(f"{'Free RAM':<20} : 256.00 MB", text)
        self.assertIn(f"{'Used RAM':<20} : 512.00 MB", text)
        self.assertIn(f"{'Used Swap':<20} : 0 KB", text)
        self.assertNotIn("Total Swap", text)

    def test_other_fields(self) -> None:
        text = format_memory_report(MEMINFO, Settings(color=False))
        other = text.split("Other Memory Information:")[1]
        self.assertIn(f"{'Cached':<20} : 2.00 MB", other)
        self.assertNotIn("MemTotal", other)

    def test_colors_are_optional(self) -> None:
        colored = format_memory_report(MEMINFO, Settings(color=True))
        self.assertIn("\x1b[", colored)
        self.assertEqual(strip_ansi(colored), format_memory_report(MEMINFO, Settings(color=False)))

    def test_unavailable(self) -> None:
        text = format_memory_report(TIMED_OUT, Settings(color=False))
        self.assertIn("Memory information unavailable: timed out", text)
        self.assertNotIn("Used RAM", text)


if __name__ == "__main__":
    unittest.main()
