"""Tests for building records from directories and JSON documents."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from tagview.runtime import records as records_mod
from tagview.table_model import InfoKey, InfoKind


class ScanDirectoryTests(unittest.TestCase):
    def test_regular_files_sorted_by_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("b.flac", "a.mp3", ".hidden.ogg"):
                (root / name).write_text("", encoding="utf-8")
            (root / "subdir").mkdir()

            records = records_mod.scan_directory(root)
            self.assertEqual([r.file_path.name for r in records], ["a.mp3", "b.flac"])
            self.assertTrue(all(r.metadata == {} for r in records))
            self.assertEqual(records[0].get(InfoKey(InfoKind.FILE_NAME)), ("a.mp3",))

            with_hidden = records_mod.scan_directory(root, show_hidden=True)
            self.assertEqual([r.file_path.name for r in with_hidden], [".hidden.ogg", "a.mp3", "b.flac"])

    def test_load_records_dispatches_on_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "x.wav").write_text("", encoding="utf-8")
            records = records_mod.load_records(Path(tmp))
        self.assertEqual(len(records), 1)


class RecordsDocumentTests(unittest.TestCase):
    def test_list_and_wrapped_documents(self) -> None:
        document = [
            {"path": "a.flac", "metadata": {"ARTIST": "Björk", "GENRE": ["Art pop", "Electronica"]}},
            {"metadata": {"TITLE": "No file"}},
        ]
        for data in (document, {"records": document}):
            with self.subTest(wrapped=isinstance(data, dict)):
                records = records_mod.parse_records(data, base_dir=Path("/music"))
                self.assertEqual(records[0].file_path, Path("/music/a.flac"))
                self.assertEqual(records[0].get_meta("GENRE"), ("Art pop", "Electronica"))
                self.assertIsNone(records[1].file_path)
                self.assertEqual(records[1].get_meta("TITLE"), ("No file",))

    def test_absolute_paths_are_kept(self) -> None:
        records = records_mod.parse_records([{"path": "/elsewhere/b.mp3"}], base_dir=Path("/music"))
        self.assertEqual(records[0].file_path, Path("/elsewhere/b.mp3"))

    def test_malformed_documents_raise_records_error(self) -> None:
        bad_documents = [
            "records",
            {"items": []},
            ["not an object"],
            [{"path": 3}],
            [{"metadata": ["A"]}],
            [{"metadata": {"A": 1}}],
            [{"metadata": {"A": ["ok", 2]}}],
        ]
        for data in bad_documents:
            with self.subTest(data=data):
                with self.assertRaises(records_mod.RecordsError):
                    records_mod.parse_records(data)

    def test_load_records_file_resolves_relative_to_document(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            doc = root / "library.json"
            doc.write_text(json.dumps([{"path": "song.ogg", "metadata": {"TITLE": "Song"}}]), encoding="utf-8")
            records = records_mod.load_records(doc)
        self.assertEqual(records[0].file_path, root / "song.ogg")

    def test_unusable_paths_raise_records_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            broken = root / "broken.json"
            broken.write_text("[", encoding="utf-8")
            with self.assertRaises(records_mod.RecordsError):
                records_mod.load_records(broken)

            plain = root / "notes.txt"
            plain.write_text("", encoding="utf-8")
            with self.assertRaises(records_mod.RecordsError):
                records_mod.load_records(plain)


if __name__ == "__main__":
    unittest.main()
