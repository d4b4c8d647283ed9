from roamy.io.document import ListDocument
from roamy.io.settings_store import InMemorySettingsStore, JsonSettingsStore, resolve_settings

__all__ = [
    'InMemorySettingsStore',
    'JsonSettingsStore',
    'ListDocument',
    'resolve_settings',
]
