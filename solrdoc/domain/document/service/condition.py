"""Condition evaluation for the indexing enablement decision.

String conditions are parsed with `ast` and walked by a small interpreter
that only knows attribute lookups, literals, comparisons and boolean logic.
Nothing is ever passed to eval().
"""

import ast
import inspect
import keyword
import operator
from typing import Any, Callable

from solrdoc.domain.shared.error import ConfigurationError

_COMPARE: dict[type[ast.cmpop], Callable[[Any, Any], Any]] = {
    ast.Eq: operator.eq,
    ast.NotEq: operator.ne,
    ast.Lt: operator.lt,
    ast.LtE: operator.le,
    ast.Gt: operator.gt,
    ast.GtE: operator.ge,
    ast.Is: operator.is_,
    ast.IsNot: operator.is_not,
    ast.In: lambda a, b: a in b,
    ast.NotIn: lambda a, b: a not in b,
}


def evaluate_condition(condition: Any, record: Any) -> bool:
    """Decide a condition against a record.

    - bool: itself
    - None: False
    - one-argument callable: truthiness of condition(record)
    - string: a bare name such as "published" is the truthiness of
      `record.published` (methods are called). Anything else is a safe
      expression over the record's attributes: names combine with `and`,
      `or`, `not`, comparisons and literals, e.g. "published and not draft"
      or "status == 'live'".

    Raises:
        ConfigurationError: For any other shape, or an expression that
            uses unsupported syntax or names a missing attribute.
    """
    if isinstance(condition, bool):
        return condition
    if condition is None:
        return False
    if isinstance(condition, str):
        if condition.isidentifier() and not keyword.iskeyword(condition):
            return bool(_named_value(record, condition))
        return bool(_Expression(condition).evaluate(record))
    if _is_predicate(condition):
        return bool(condition(record))
    raise ConfigurationError(
        f"Unsupported condition {condition!r}: expected a bool, None, an "
        "expression string or a one-argument callable",
        code="INVALID_CONDITION",
    )


def _named_value(record: Any, name: str) -> Any:
    try:
        value = getattr(record, name)
    except AttributeError:
        raise ConfigurationError(
            f"Condition '{name}': record has no attribute '{name}'",
            code="INVALID_CONDITION",
        ) from None
    return value() if inspect.ismethod(value) else value


def _is_predicate(condition: Any) -> bool:
    if not callable(condition):
        return False
    try:
        inspect.signature(condition).bind(object())
    except TypeError:
        return False
    except ValueError:
        # Builtins without an introspectable signature
        return True
    return True


class _Expression:
    """A parsed condition expression."""

    def __init__(self, source: str) -> None:
        self.source = source
        try:
            self._tree = ast.parse(source.strip(), mode="eval")
        except SyntaxError as e:
            raise self._error(f"invalid syntax ({e.msg})") from None

    def evaluate(self, record: Any) -> Any:
        return self._eval(self._tree.body, record)

    def _error(self, reason: str) -> ConfigurationError:
        return ConfigurationError(
            f"Condition '{self.source}': {reason}", code="INVALID_CONDITION"
        )

    def _eval(self, node: ast.AST, record: Any) -> Any:
        if isinstance(node, ast.Constant):
            return node.value
        if isinstance(node, ast.Name):
            return self._lookup(record, node.id)
        if isinstance(node, ast.Attribute):
            return self._lookup(self._eval(node.value, record), node.attr)
        if isinstance(node, ast.BoolOp):
            if isinstance(node.op, ast.And):
                result: Any = True
                for value in node.values:
                    result = self._eval(value, record)
                    if not result:
                        return result
                return result
            result = False
            for value in node.values:
                result = self._eval(value, record)
                if result:
                    return result
            return result
        if isinstance(node, ast.UnaryOp):
            operand = self._eval(node.operand, record)
            if isinstance(node.op, ast.Not):
                return not operand
            if isinstance(node.op, ast.USub):
                try:
                    return -operand
                except TypeError as e:
                    raise self._error(f"cannot negate {operand!r}") from e
            raise self._error(f"unsupported operator {type(node.op).__name__}")
        if isinstance(node, ast.Compare):
            left = self._eval(node.left, record)
            for op, comparator in zip(node.ops, node.comparators):
                right = self._eval(comparator, record)
                try:
                    result = _COMPARE[type(op)](left, right)
                except TypeError as e:
                    raise self._error(f"cannot compare {left!r} with {right!r}") from e
                if not result:
                    return False
                left = right
            return True
        if isinstance(node, (ast.Tuple, ast.List, ast.Set)):
            return [self._eval(elt, record) for elt in node.elts]
        raise self._error(f"unsupported syntax {type(node).__name__}")

    def _lookup(self, obj: Any, name: str) -> Any:
        if name.startswith("_"):
            raise self._error(f"private attribute '{name}' is not accessible")
        try:
            value = getattr(obj, name)
        except AttributeError:
            raise self._error(f"record has no attribute '{name}'") from None
        if inspect.ismethod(value):
            raise self._error(f"'{name}' is a method; use a property or a callable condition")
        return value
