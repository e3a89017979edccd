class TopologyException(Exception):
    """Base class for graph construction errors"""


class DuplicateResourceException(TopologyException):
    def __init__(self, key):
        self.key = key
        super().__init__(f"resource `{key}` is declared more than once")


class UnknownReferenceException(TopologyException):
    def __init__(self, key, reference):
        self.key = key
        self.reference = reference
        super().__init__(f"resource `{key}` references `{reference}`, which is not declared")


class DependencyCycleException(TopologyException):
    def __init__(self, cycle: list):
        self.cycle = cycle
        super().__init__(f"dependency cycle detected: {' -> '.join(str(k) for k in cycle)}")
