import unittest

from adbctl.adb import NOT_AVAILABLE, TIMED_OUT
from adbctl.report import PROPERTY_QUERIES, DeviceInfo, PropertyQuery, collect_device_info, run_query


class FakeAdb:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def shell(self, serial, command, timeout=None):
        self.calls.append((serial, command))
        return self.responses.get(command, NOT_AVAILABLE)


class TestPropertyTable(unittest.TestCase):
    def test_labels_are_unique(self) -> None:
        labels = [q.label for q in PROPERTY_QUERIES]
        self.assertEqual(len(labels), len(set(labels)))


class TestCollectDeviceInfo(unittest.TestCase):
    def test_one_entry_per_query_in_order(self) -> None:
        info = collect_device_info(FakeAdb({}), "SER1")
        self.assertEqual([e.label for e in info], [q.label for q in PROPERTY_QUERIES])
        self.assertTrue(all(e.value == NOT_AVAILABLE for e in info))

    def test_values_and_post_processing(self) -> None:
        adb = FakeAdb(
            {
                "getprop ro.product.model": "AFTMM",
                "getprop ro.product.manufacturer": "Amazon",
                "getprop ro.product.cpu.abi": "armeabi-v7a",
                "cat /proc/meminfo": "MemTotal: 2097152 kB\nMemFree: 0 kB\nMemAvailable: 1048576 kB",
                "cat /proc/cpuinfo": "processor : 0\nprocessor : 1",
                "top -n 1 | grep 'CPU:'": "CPU: 10% usr 20% sys",
                "wm size": "Physical size: 1920x1080",
            }
        )
        values = {e.label: e.value for e in collect_device_info(adb, "SER1")}
        self.assertTrue(values["Model"].startswith("Fire TV Stick 4K - 1st Gen (2018) (https://"))
        self.assertEqual(values["Manufacturer"], "Amazon")
        self.assertEqual(values["CPU ABI"], "ARM EABI v7a (32-bit, with hardware floating-point support)")
        self.assertEqual(values["Memory"], "2.00 GB / 2097152 kB (1.00 GB used, 0.00 GB free)")
        self.assertEqual(values["CPU"], "2 cores (20.00% used)")
        self.assertEqual(values["Screen Resolution"], "Physical size: 1920x1080")
        self.assertEqual(values["Storage"], NOT_AVAILABLE)
        self.assertTrue(all(serial == "SER1" for serial, _ in adb.calls))

    def test_failed_primary_skips_post_processing(self) -> None:
        adb = FakeAdb({"cat /proc/cpuinfo": TIMED_OUT, "top -n 1 | grep 'CPU:'": "CPU: 1 2 3%"})
        query = next(q for q in PROPERTY_QUERIES if q.label == "CPU")
        self.assertEqual(run_query(adb, "SER1", query), DeviceInfo("CPU", TIMED_OUT))
        self.assertEqual(adb.calls, [("SER1", "cat /proc/cpuinfo")])

    def test_duplicate_labels_are_rejected(self) -> None:
        queries = (PropertyQuery("Model", ("getprop a",)), PropertyQuery("Model", ("getprop b",)))
        with self.assertRaises(ValueError):
            collect_device_info(FakeAdb({}), "SER1", queries=queries)


if __name__ == "__main__":
    unittest.main()
