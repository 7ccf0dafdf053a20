from value_emitter.lib.disposable import Disposable
from value_emitter.lib.events import Subscription, ValueEmitter
from value_emitter.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    Disposable.__name__,
    Subscription.__name__,
    ValueEmitter.__name__,
]
