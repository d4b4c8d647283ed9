from __future__ import annotations

from roamy.constants import BULLET_LENGTH_LIMIT
from roamy.core.errors import CommandUnavailableError, RoamyError, SettingsStoreError
from roamy.core.models import CommandSpec, Edit, EditorContext, Settings
from roamy.core.report import RewriteReport
from roamy.io.document import ListDocument
from roamy.io.settings_store import InMemorySettingsStore, JsonSettingsStore
from roamy.logging.helpers import get_logger
from roamy.plugin import PluginHandle, RoamyPlugin, initialize, teardown
from roamy.processing.line_ops import LineRewriter
from roamy.processing.line_rules import LINE_RULES, LineRule
from roamy.runtime.config import PluginConfig
from roamy.runtime.host import HeadlessHost

__version__ = '0.1.0'

DEFAULT_SETTINGS = Settings()


def fix_lines(lines):
    """Return a fixed copy of `lines` using the default rules."""
    doc = ListDocument(lines)
    LineRewriter(logger=get_logger('processing.lineops')).rewrite(doc)
    return doc.lines


__all__ = [
    'BULLET_LENGTH_LIMIT',
    'CommandSpec',
    'CommandUnavailableError',
    'DEFAULT_SETTINGS',
    'Edit',
    'EditorContext',
    'HeadlessHost',
    'InMemorySettingsStore',
    'JsonSettingsStore',
    'LINE_RULES',
    'LineRewriter',
    'LineRule',
    'ListDocument',
    'PluginConfig',
    'PluginHandle',
    'RewriteReport',
    'RoamyError',
    'RoamyPlugin',
    'Settings',
    'SettingsStoreError',
    'fix_lines',
    'initialize',
    'teardown',
]
