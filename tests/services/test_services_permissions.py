import unittest

from fake_drive import FakeDrive

from gdriveclient.auth import DriveSession
from gdriveclient.errors import NotFoundError
from gdriveclient.services import ObjectService


class TestPermissionService(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.drive = FakeDrive()
        self.objects = ObjectService(DriveSession.from_controller(self.drive))
        self.permissions = self.objects.permissions

    async def test_toggle_on_adds_anyone_reader(self) -> None:
        file_id = self.drive.add("a.txt")

        record = await self.permissions.share_link_toggle(file_id, True)

        self.assertTrue(record.found)
        self.assertTrue(record.is_shared)
        self.assertTrue(record.has_public_link)
        public = [p for p in record.permissions if p.type == "anyone"]
        self.assertEqual(public[0].role, "reader")
        self.assertIn(("create_permission", file_id, {"role": "reader", "type": "anyone"}),
                      self.drive.calls)

    async def test_toggle_off_removes_anyone_entry(self) -> None:
        file_id = self.drive.add("a.txt")
        await self.permissions.share_link_toggle(file_id, True)

        record = await self.permissions.share_link_toggle(file_id, False)
        self.assertFalse(record.has_public_link)

        fetched = await self.objects.get_by_id(file_id)
        self.assertNotIn("anyone", [p.type for p in fetched.permissions])
        self.assertFalse(fetched.is_shared)

    async def test_toggle_refetches_by_id_not_by_name(self) -> None:
        file_id = self.drive.add("dup.txt")
        self.drive.add("dup.txt")

        record = await self.permissions.share_link_toggle(file_id, True)

        self.assertEqual(record.id, file_id)
        self.assertFalse(any(c[0] == "list_page" for c in self.drive.calls))

    async def test_toggle_off_without_public_permission_raises(self) -> None:
        file_id = self.drive.add("a.txt")
        with self.assertRaises(NotFoundError):
            await self.permissions.share_link_toggle(file_id, False)


if __name__ == "__main__":
    unittest.main()
