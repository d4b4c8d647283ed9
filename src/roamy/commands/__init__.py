from roamy.commands.dialog import OpenMessageDialogCommand
from roamy.commands.fix_lines import FixLinesCommand
from roamy.commands.registry import CommandRegistry

__all__ = ['CommandRegistry', 'FixLinesCommand', 'OpenMessageDialogCommand']
