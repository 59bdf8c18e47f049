from collections import namedtuple

from soulbound.logger import get_logger

Event = namedtuple('Event', ['contract', 'name', 'data'])


class EventLog:
    """
    Side channel for contract notifications.

    Events emitted during a call are buffered and only published, to the
    log and to subscribers, when the call commits. A rolled back call
    publishes nothing. Subscribers are fire-and-forget: a failing
    subscriber is logged and never affects the call that emitted.
    """
    def __init__(self):
        self.pending = []
        self.events = []
        self.subscribers = []
        self.log = get_logger('Events')

    def emit(self, contract, name, **data):
        self.pending.append(Event(contract=contract, name=name, data=data))

    def subscribe(self, callback, name=None):
        self.subscribers.append((name, callback))

    def unsubscribe(self, callback):
        self.subscribers = [(n, c) for n, c in self.subscribers if c != callback]

    def commit(self):
        published, self.pending = self.pending, []

        for event in published:
            self.events.append(event)
            self._notify(event)

        return published

    def rollback(self):
        if self.pending:
            self.log.debug('Dropping {} pending events'.format(len(self.pending)))
        self.pending = []

    def filter(self, name=None, contract=None):
        return [e for e in self.events
                if (name is None or e.name == name) and (contract is None or e.contract == contract)]

    def flush(self):
        self.pending = []
        self.events = []

    def _notify(self, event):
        for name, callback in self.subscribers:
            if name is not None and name != event.name:
                continue
            try:
                callback(event)
            except Exception as e:
                self.log.error('Subscriber {} failed on {}: {}'.format(callback, event.name, e))
