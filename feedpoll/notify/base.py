from typing import Iterable, List

class BaseNotifier:
    def notify(self, title: str, message: str) -> None:
        raise NotImplementedError

class CompositeNotifier(BaseNotifier):
    """
    Deliver every notification to all sinks in order.

    A sink that fails is reported on the console and skipped; the
    remaining sinks still receive the notification.
    """

    def __init__(self, sinks: Iterable[BaseNotifier]):
        self.sinks: List[BaseNotifier] = list(sinks)

    def notify(self, title: str, message: str) -> None:
        for sink in self.sinks:
            try:
                sink.notify(title, message)
            except Exception as e:
                print(f"Notifier {type(sink).__name__} failed: {e}")
