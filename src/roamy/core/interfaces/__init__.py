from .command import CommandProtocol
from .document import DocumentProtocol
from .host import HostProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .settings import SettingsStoreProtocol

__all__ = [
    'CommandProtocol',
    'DocumentProtocol',
    'HostProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'SettingsStoreProtocol',
]
