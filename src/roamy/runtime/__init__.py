from roamy.runtime.config import PluginConfig
from roamy.runtime.host import HeadlessHost

__all__ = ['HeadlessHost', 'PluginConfig']
