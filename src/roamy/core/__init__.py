from roamy.core.errors import CommandUnavailableError, RoamyError, SettingsStoreError
from roamy.core.models import CommandSpec, Edit, EditorContext, Settings
from roamy.core.report import RewriteReport, StageTimer

__all__ = [
    'CommandSpec',
    'CommandUnavailableError',
    'Edit',
    'EditorContext',
    'RewriteReport',
    'RoamyError',
    'Settings',
    'SettingsStoreError',
    'StageTimer',
]
