#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Settings resolution and persistence."""
from __future__ import annotations

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from roamy.core.errors import SettingsStoreError
from roamy.core.models import Settings
from roamy.io.settings_store import InMemorySettingsStore, JsonSettingsStore, resolve_settings


class ResolveSettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        s = resolve_settings(None)
        self.assertEqual(s, Settings(label="default", flag=True, message="Roamy Rules!"))
        self.assertEqual(resolve_settings({}), s)

    def test_shallow_merge(self) -> None:
        s = resolve_settings({"message": "hi"})
        self.assertEqual(s.message, "hi")
        self.assertEqual(s.label, "default")
        self.assertTrue(s.flag)

    def test_legacy_keys(self) -> None:
        s = resolve_settings({"mySetting": "secret", "noBullets": False})
        self.assertEqual(s.label, "secret")
        self.assertFalse(s.flag)

    def test_current_key_beats_legacy(self) -> None:
        s = resolve_settings({"label": "new", "mySetting": "old"})
        self.assertEqual(s.label, "new")
        s = resolve_settings({"mySetting": "old", "label": "new"})
        self.assertEqual(s.label, "new")

    def test_wrong_types_fall_back_to_default(self) -> None:
        with self.assertLogs("roamy.io.settings", level="WARNING") as cm:
            s = resolve_settings({"flag": "yes", "message": 3, "label": "ok"})
        self.assertEqual(s, Settings(label="ok"))
        self.assertEqual(len(cm.output), 2)

    def test_unknown_keys_ignored(self) -> None:
        self.assertEqual(resolve_settings({"colour": "red"}), Settings())


class InMemoryStoreTests(unittest.TestCase):
    def test_roundtrip_and_counter(self) -> None:
        store = InMemorySettingsStore()
        self.assertIsNone(store.load())
        store.save({"label": "x"})
        self.assertEqual(store.load(), {"label": "x"})
        self.assertEqual(store.saves, 1)


class JsonStoreTests(unittest.TestCase):
    def test_default_path_from_env(self) -> None:
        with patch.dict(os.environ, {"ROAMY_SETTINGS_PATH": "/tmp/roamy-test/data.json"}):
            store = JsonSettingsStore.default()
        self.assertEqual(store.path, Path("/tmp/roamy-test/data.json"))

    def test_missing_file_loads_none(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self.assertIsNone(JsonSettingsStore(Path(td) / "data.json").load())

    def test_save_creates_parents(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "nested" / "data.json"
            store = JsonSettingsStore(path)
            store.save(Settings(message="¡hola!").to_dict())
            self.assertEqual(json.loads(path.read_text(encoding="utf-8"))["message"], "¡hola!")
            self.assertEqual(store.load()["label"], "default")
            self.assertEqual([p.name for p in path.parent.iterdir()], ["data.json"])

    def test_malformed_json_raises(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "data.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(SettingsStoreError):
                JsonSettingsStore(path).load()

    def test_non_object_raises(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "data.json"
            path.write_text("[1, 2]", encoding="utf-8")
            with self.assertRaises(SettingsStoreError):
                JsonSettingsStore(path).load()


if __name__ == "__main__":
    unittest.main()
