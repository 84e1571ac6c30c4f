import asyncio
import unittest

from cloudfilemgr.backends import FileTable, ReadWriteLock
from cloudfilemgr.models import FileItem, ProviderType


def _item(item_id: str, parent_id, name: str = "n", is_folder: bool = False) -> FileItem:
    return FileItem(
        id=item_id,
        name=name,
        is_folder=is_folder,
        provider=ProviderType.DROPBOX,
        parent_id=parent_id,
    )


class TestFileTable(unittest.TestCase):
    def _make_table(self) -> FileTable:
        return FileTable(
            [
                _item("root", None, "ROOT", is_folder=True),
                _item("A", "root", "A", is_folder=True),
                _item("f1", "A", "one.txt"),
                _item("f2", "root", "two.txt"),
            ]
        )

    def test_children_in_insertion_order(self) -> None:
        table = self._make_table()
        self.assertEqual([i.id for i in table.children_of("root")], ["A", "f2"])
        self.assertEqual(table.children_of("missing"), [])

    def test_replace_keeps_position(self) -> None:
        table = self._make_table()
        table.replace(_item("A", "root", "renamed", is_folder=True))
        self.assertEqual([i.name for i in table.children_of("root")], ["renamed", "two.txt"])

    def test_replace_missing_raises(self) -> None:
        table = self._make_table()
        with self.assertRaises(KeyError):
            table.replace(_item("nope", "root"))

    def test_duplicate_append_rejected(self) -> None:
        table = self._make_table()
        with self.assertRaises(ValueError):
            table.append(_item("f1", "root"))

    def test_remove(self) -> None:
        table = self._make_table()
        self.assertTrue(table.remove("f1"))
        self.assertFalse(table.remove("f1"))
        self.assertNotIn("f1", table)
        self.assertEqual(len(table), 3)


class TestReadWriteLock(unittest.IsolatedAsyncioTestCase):
    async def test_readers_share_the_lock(self) -> None:
        lock = ReadWriteLock()
        both_inside = asyncio.Event()
        inside = 0

        async def reader() -> None:
            nonlocal inside
            async with lock.read():
                inside += 1
                if inside == 2:
                    both_inside.set()
                await asyncio.wait_for(both_inside.wait(), timeout=1)

        await asyncio.gather(reader(), reader())
        self.assertEqual(lock.readers, 0)

    async def test_writer_excludes_readers(self) -> None:
        lock = ReadWriteLock()
        events: list[str] = []
        writer_entered = asyncio.Event()
        release_writer = asyncio.Event()

        async def writer() -> None:
            async with lock.write():
                events.append("write-start")
                writer_entered.set()
                await release_writer.wait()
                events.append("write-end")

        async def reader() -> None:
            await writer_entered.wait()
            async with lock.read():
                events.append("read")

        writer_task = asyncio.create_task(writer())
        reader_task = asyncio.create_task(reader())

        await writer_entered.wait()
        await asyncio.sleep(0.01)
        self.assertEqual(events, ["write-start"])

        release_writer.set()
        await asyncio.gather(writer_task, reader_task)
        self.assertEqual(events, ["write-start", "write-end", "read"])
        self.assertFalse(lock.writer_active)

    async def test_writer_waits_for_readers(self) -> None:
        lock = ReadWriteLock()
        events: list[str] = []
        reader_entered = asyncio.Event()
        release_reader = asyncio.Event()

        async def reader() -> None:
            async with lock.read():
                events.append("read-start")
                reader_entered.set()
                await release_reader.wait()
                events.append("read-end")

        async def writer() -> None:
            await reader_entered.wait()
            async with lock.write():
                events.append("write")

        tasks = [asyncio.create_task(reader()), asyncio.create_task(writer())]
        await reader_entered.wait()
        await asyncio.sleep(0.01)
        self.assertEqual(events, ["read-start"])

        release_reader.set()
        await asyncio.gather(*tasks)
        self.assertEqual(events, ["read-start", "read-end", "write"])


if __name__ == "__main__":
    unittest.main()
