class RecordingGenerator(object):
    """
    Results generator that records calls instead of generating anything.

    Calls are stored on the class, as ``(year, operation)`` tuples, so they
    can be inspected after the driver has discarded its generators.  Set
    ``fail_on`` to a ``(year, operation)`` tuple to raise on that call.

    """
    calls = []
    instances = []
    fail_on = None

    @classmethod
    def reset(cls):
        cls.calls = []
        cls.instances = []
        cls.fail_on = None

    def __init__(self, year):
        self.year = year
        self.instances.append(self)

    def _record(self, operation):
        if self.fail_on == (self.year, operation):
            raise RuntimeError("Couldn't generate {} results for {}".format(
                operation, self.year))
        self.calls.append((self.year, operation))

    def congress(self):
        self._record('congress')

    def summary(self):
        self._record('summary')

    def president(self):
        self._record('president')
