"""Pytest configuration and fixtures."""

import operator

import pytest

from attribute_controller.core import (
    DEFAULT_DOMAINS,
    AttributeItem,
    InvalidQueryError,
    NotFoundError,
    SearchResult,
)


COMPARATORS = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "=~": lambda value, prefix: str(value).startswith(str(prefix)),
    "~=": lambda value, part: str(part) in str(value),
}


class InMemoryAttributeController:
    """Attribute controller searching a list of items held in memory."""

    def __init__(self, items):
        self.items = list(items)
        self.conditions = []
        self.sort_key = None
        self.start = 0
        self.limit = 100
        self.calls = []

    def state(self):
        return {
            "conditions": list(self.conditions),
            "sort": self.sort_key,
            "slice": (self.start, self.limit),
        }

    def attribute(self, attr_ids):
        self.calls.append("attribute")
        if attr_ids:
            self.conditions.append({"==": {"attribute.id": attr_ids}})
        return self

    def compare(self, operator, key, value):
        self.calls.append("compare")
        self.conditions.append(self._condition(operator, {key: value}))
        return self

    def domain(self, domain):
        self.calls.append("domain")
        self.conditions.append({"==": {"attribute.domain": domain}})
        return self

    def parse(self, conditions):
        self.calls.append("parse")
        self._validate(conditions)
        self.conditions.append(conditions)
        return self

    def slice(self, start, limit):
        self.calls.append("slice")
        self.start, self.limit = start, limit
        return self

    def sort(self, key=None):
        self.calls.append("sort")
        self.sort_key = key
        return self

    def type(self, codes):
        self.calls.append("type")
        if codes:
            self.conditions.append({"==": {"attribute.type": codes}})
        return self

    def get(self, id, domains=DEFAULT_DOMAINS):
        self.calls.append("get")
        for item in self.items:
            if item.id == id:
                return self._with_refs(item, domains)
        raise NotFoundError(f"Unable to find attribute with ID {id!r}")

    def find(self, code, domains=DEFAULT_DOMAINS, type="product"):
        self.calls.append("find")
        for item in self.items:
            if item.code == code and item.type == type:
                return self._with_refs(item, domains)
        raise NotFoundError(f"Unable to find attribute with code {code!r} and type {type!r}")

    def search(self, domains=DEFAULT_DOMAINS):
        self.calls.append("search")
        found = [item for item in self.items if all(self._matches(c, item) for c in self.conditions)]

        if self.sort_key:
            key = self.sort_key.lstrip("-").split(".")[-1]
            found.sort(key=lambda item: getattr(item, key), reverse=self.sort_key.startswith("-"))

        page = found[self.start:self.start + self.limit]
        return SearchResult(items=[self._with_refs(item, domains) for item in page], total=len(found))

    @staticmethod
    def _condition(op, pair):
        if op not in COMPARATORS:
            raise InvalidQueryError(f"Invalid operator {op!r}")
        return {op: pair}

    def _validate(self, condition):
        if not isinstance(condition, dict) or len(condition) != 1:
            raise InvalidQueryError(f"Invalid condition {condition!r}")

        op, operand = next(iter(condition.items()))
        if op in ("&&", "||"):
            if not isinstance(operand, list):
                raise InvalidQueryError(f"Operator {op!r} expects a list of conditions")
            for sub in operand:
                self._validate(sub)
        elif op == "!":
            self._validate(operand)
        elif op in COMPARATORS:
            if not isinstance(operand, dict):
                raise InvalidQueryError(f"Operator {op!r} expects a key/value mapping")
        else:
            raise InvalidQueryError(f"Invalid operator {op!r}")

    def _matches(self, condition, item):
        op, operand = next(iter(condition.items()))
        if op == "&&":
            return all(self._matches(sub, item) for sub in operand)
        if op == "||":
            return any(self._matches(sub, item) for sub in operand)
        if op == "!":
            return not self._matches(operand, item)

        compare = COMPARATORS[op]
        for key, value in operand.items():
            actual = getattr(item, key.split(".")[-1])
            values = value if isinstance(value, list) else [value]
            if op == "!=":
                hit = all(compare(actual, v) for v in values)
            else:
                hit = any(compare(actual, v) for v in values)
            if not hit:
                return False
        return True

    @staticmethod
    def _with_refs(item, domains):
        refs = {domain: refs for domain, refs in item.refs.items() if domain in domains}
        return item.model_copy(update={"refs": refs})


@pytest.fixture
def attribute_items():
    """Sample attribute items of different types."""
    return [
        AttributeItem(id="1", code="red", type="color", label="Red", position=2,
                      refs={"media": ["red.png"], "price": ["+1.00"]}),
        AttributeItem(id="2", code="blue", type="color", label="Blue", position=1),
        AttributeItem(id="3", code="green", type="color", label="Green", position=0, status=0),
        AttributeItem(id="4", code="xl", type="size", label="XL", position=3),
        AttributeItem(id="5", code="s", type="size", label="S", position=4),
    ]


@pytest.fixture
def controller(attribute_items):
    """In-memory attribute controller seeded with the sample items."""
    return InMemoryAttributeController(attribute_items)


@pytest.fixture
def context():
    """Opaque request context."""
    return object()
