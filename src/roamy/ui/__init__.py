from roamy.ui.dialog import MessageDialog
from roamy.ui.settings_tab import SettingsTab, TextBinding

__all__ = ['MessageDialog', 'SettingsTab', 'TextBinding']
