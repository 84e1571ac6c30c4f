import unittest
import uuid

from cloudfilemgr.util.ids import new_connection_id, new_item_id, new_uuid


class TestUtilIds(unittest.TestCase):
    def test_new_uuid_is_valid_uuid4(self) -> None:
        value = new_uuid()
        parsed = uuid.UUID(value)
        self.assertEqual(str(parsed), value)
        self.assertEqual(parsed.version, 4)

    def test_new_item_id_is_prefixed(self) -> None:
        value = new_item_id("gdrive_")
        self.assertTrue(value.startswith("gdrive_"))
        self.assertEqual(uuid.UUID(value[len("gdrive_"):]).version, 4)

    def test_new_connection_id_is_valid_uuid4(self) -> None:
        self.assertEqual(uuid.UUID(new_connection_id()).version, 4)

    def test_ids_are_unique(self) -> None:
        values = {new_item_id("od_"), new_item_id("od_"), new_item_id("od_")}
        self.assertEqual(len(values), 3)


if __name__ == "__main__":
    unittest.main()
