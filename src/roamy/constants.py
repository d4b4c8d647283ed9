from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Settings defaults. Tests import them as `roamy.DEFAULT_SETTINGS`.
DEFAULT_LABEL: str = 'default'
DEFAULT_FLAG: bool = True
DEFAULT_MESSAGE: str = 'Roamy Rules!'

# Stored keys written by the first releases of the plugin.
LEGACY_SETTING_KEYS = {
    'mySetting': 'label',
    'noBullets': 'flag',
}

# Indented bullets longer than this lose their bullet entirely.
# Length is len(line): code points, not UTF-16 units; `\s` is Python's Unicode set.
BULLET_LENGTH_LIMIT: int = 40

MARKDOWN_VIEW: str = 'markdown'

CMD_OPEN_MODAL_SIMPLE = ('open-roamy-modal-simple', 'Open roamy modal (simple)')
CMD_OPEN_MODAL_COMPLEX = ('open-roamy-modal-complex', 'Open roamy modal (complex)')
CMD_FIX_BULLETS = ('roamy-editor-command-fix-bullets', 'roamy fix bullets')

RIBBON_ICON: str = 'dice'
RIBBON_TITLE: str = 'Roamy'
RIBBON_NOTICE: str = 'This is Roamy!'
STATUS_TEXT: str = 'Roamy Status Bar'
SETTINGS_TAB_TITLE: str = 'Roamy Settings.'

DIAGNOSTIC_INTERVAL_S: float = 5 * 60
