import unittest

from cloudfilemgr.backends.operations import (
    LATENCY_CLASS_BY_OPERATION,
    LatencyClass,
    LatencyProfile,
    Operation,
)


class TestLatencyClasses(unittest.TestCase):
    def test_every_operation_has_a_class(self) -> None:
        for op in Operation:
            self.assertIn(op, LATENCY_CLASS_BY_OPERATION)

    def test_long_operations(self) -> None:
        long_ops = {
            op for op, cls in LATENCY_CLASS_BY_OPERATION.items() if cls is LatencyClass.LONG
        }
        self.assertEqual(
            long_ops,
            {
                Operation.AUTHENTICATE,
                Operation.DOWNLOAD_FILE,
                Operation.UPLOAD_FILE,
                Operation.COPY_FILE,
            },
        )

    def test_metadata_is_lookup(self) -> None:
        self.assertIs(
            LATENCY_CLASS_BY_OPERATION[Operation.GET_FILE_METADATA],
            LatencyClass.LOOKUP,
        )


class TestLatencyProfile(unittest.TestCase):
    def test_defaults(self) -> None:
        profile = LatencyProfile()
        self.assertEqual(profile.delay_for(Operation.LIST_FILES), 0.3)
        self.assertEqual(profile.delay_for(Operation.UPLOAD_FILE), 0.5)
        self.assertEqual(profile.delay_for(Operation.GET_FILE_METADATA), 0.2)

    def test_none_is_zero(self) -> None:
        profile = LatencyProfile.none()
        for op in Operation:
            self.assertEqual(profile.delay_for(op), 0.0)

    def test_scaled(self) -> None:
        profile = LatencyProfile(short_sec=0.2, long_sec=0.4, lookup_sec=0.1).scaled(0.5)
        self.assertAlmostEqual(profile.short_sec, 0.1)
        self.assertAlmostEqual(profile.long_sec, 0.2)
        self.assertAlmostEqual(profile.lookup_sec, 0.05)

    def test_negative_rejected(self) -> None:
        with self.assertRaises(ValueError):
            LatencyProfile(short_sec=-1)
        with self.assertRaises(ValueError):
            LatencyProfile().scaled(-1)


if __name__ == "__main__":
    unittest.main()
