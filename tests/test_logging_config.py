#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Logging helpers and environment-driven configuration."""
from __future__ import annotations

import io
import json
import logging
import os
import unittest
from pathlib import Path
from unittest.mock import patch

import roamy
from roamy.logging.factory import DefaultLoggerFactory
from roamy.logging.helpers import JsonLogFormatter, get_logger
from roamy.runtime.config import PluginConfig


class LoggerNameTests(unittest.TestCase):
    def test_namespacing(self) -> None:
        self.assertEqual(get_logger().name, "roamy")
        self.assertEqual(get_logger("plugin").name, "roamy.plugin")
        self.assertEqual(get_logger("roamy.io").name, "roamy.io")

    def test_factory_returns_namespaced_logger(self) -> None:
        lg = DefaultLoggerFactory(stream=io.StringIO()).get_logger("commands")
        self.assertEqual(lg.name, "roamy.commands")

    def test_factory_from_config(self) -> None:
        base = logging.getLogger("roamy")
        self.addCleanup(base.setLevel, base.level)
        cfg = PluginConfig(json_logs=True, log_level=logging.WARNING)
        lg = DefaultLoggerFactory.from_config(cfg, stream=io.StringIO()).get_logger("plugin")
        self.assertEqual(lg.name, "roamy.plugin")
        self.assertEqual(logging.getLogger("roamy").level, logging.WARNING)


class JsonFormatterTests(unittest.TestCase):
    def test_payload(self) -> None:
        record = logging.LogRecord("roamy.x", logging.INFO, __file__, 1, "fixed %d", (3,), None)
        record.context = {"index": 2}
        payload = json.loads(JsonLogFormatter().format(record))
        self.assertEqual(payload["msg"], "fixed 3")
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["module"], "roamy.x")
        self.assertEqual(payload["version"], roamy.__version__)
        self.assertEqual(payload["ctx"], {"index": 2})
        self.assertTrue(payload["ts"].endswith("Z"))


class PluginConfigTests(unittest.TestCase):
    def test_from_env(self) -> None:
        env = {
            "ROAMY_JSON_LOGS": "1",
            "ROAMY_LOG_LEVEL": "debug",
            "ROAMY_DIAGNOSTIC_INTERVAL": "12.5",
            "ROAMY_SETTINGS_PATH": "/tmp/roamy/data.json",
        }
        with patch.dict(os.environ, env):
            cfg = PluginConfig.from_env()
        self.assertTrue(cfg.json_logs)
        self.assertEqual(cfg.log_level, logging.DEBUG)
        self.assertEqual(cfg.diagnostic_interval_s, 12.5)
        self.assertEqual(cfg.settings_path, Path("/tmp/roamy/data.json"))

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = PluginConfig.from_env()
        self.assertFalse(cfg.json_logs)
        self.assertEqual(cfg.log_level, logging.INFO)
        self.assertEqual(cfg.diagnostic_interval_s, 300)

    def test_invalid_values(self) -> None:
        with patch.dict(os.environ, {"ROAMY_DIAGNOSTIC_INTERVAL": "soon"}):
            with self.assertRaises(ValueError):
                PluginConfig.from_env()
        with patch.dict(os.environ, {"ROAMY_LOG_LEVEL": "LOUD"}):
            with self.assertRaises(ValueError):
                PluginConfig.from_env()
        with self.assertRaises(ValueError):
            PluginConfig(diagnostic_interval_s=0)
