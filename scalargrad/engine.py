import math
from enum import Enum


class Op(Enum):
    CONSTANT = ""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    POW = "**"
    TANH = "tanh"


def _fmt(number):
    return f"{number:g}"


def _pow(base, exponent):
    # float pow with IEEE results: poles and overflow give inf, complex gives nan
    base = float(base)
    odd = float(exponent).is_integer() and int(exponent) % 2 == 1
    try:
        result = base**exponent
    except ZeroDivisionError:
        return math.copysign(math.inf, base) if odd else math.inf
    except OverflowError:
        return -math.inf if base < 0 and odd else math.inf
    if isinstance(result, complex):
        return math.nan
    return result


class Value:
    def __init__(self, data, label="", _children=(), _op=Op.CONSTANT):
        self.data = float(data)
        self.label = label if label else _fmt(data)
        self.grad = 0.0
        # ordered, duplicates kept: x * x has two operand slots
        self._prev = tuple(_children)
        self._op = _op
        self.exponent = None
        self._backward = lambda: None

    @property
    def op(self):
        return self._op

    def __add__(self, other):
        other = other if isinstance(other, Value) else Value(other)
        out = Value(
            self.data + other.data,
            f"({self.label} + {other.label})",
            _children=(self, other),
            _op=Op.ADD,
        )

        def _backward():
            self.grad += out.grad
            other.grad += out.grad

        out._backward = _backward

        return out

    def __sub__(self, other):
        other = other if isinstance(other, Value) else Value(other)
        out = Value(
            self.data - other.data,
            f"({self.label} - {other.label})",
            _children=(self, other),
            _op=Op.SUB,
        )

        def _backward():
            self.grad += out.grad
            other.grad -= out.grad

        out._backward = _backward

        return out

    def __mul__(self, other):
        other = other if isinstance(other, Value) else Value(other)
        out = Value(
            self.data * other.data,
            f"({self.label} * {other.label})",
            _children=(self, other),
            _op=Op.MUL,
        )

        def _backward():
            self.grad += other.data * out.grad
            other.grad += self.data * out.grad

        out._backward = _backward

        return out

    def __neg__(self):
        return self * Value(-1.0, "-1")

    def __truediv__(self, other):  # self / other
        return self * (other**-1 if isinstance(other, Value) else _pow(other, -1))

    def __pow__(self, other):
        assert isinstance(other, (int, float)), "only support int/float powers"
        out = Value(
            _pow(self.data, other),
            f"{self.label}^{_fmt(other)}",
            _children=(self,),
            _op=Op.POW,
        )
        out.exponent = float(other)

        def _backward():
            self.grad += (other * _pow(self.data, other - 1)) * out.grad

        out._backward = _backward
        return out

    def __radd__(self, other):
        return self + other

    def __rsub__(self, other):  # other - self
        return Value(other) - self

    def __rmul__(self, other):
        return self * other

    def __rtruediv__(self, other):  # other / self
        return other * self**-1

    def tanh(self):
        t = math.tanh(self.data)
        out = Value(t, f"tanh({self.label})", _children=(self,), _op=Op.TANH)

        def _backward():
            self.grad += (1 - t**2) * out.grad

        out._backward = _backward

        return out

    def backward(self):
        # reverse topological order of every node reachable from self;
        # explicit stack so long chains stay clear of the recursion limit
        topo = []
        visited = {self}
        stack = [(self, iter(self._prev))]
        while stack:
            v, children = stack[-1]
            for child in children:
                if child not in visited:
                    visited.add(child)
                    stack.append((child, iter(child._prev)))
                    break
            else:
                stack.pop()
                topo.append(v)

        # a node runs its rule only after all of its consumers have run
        self.grad = 1.0
        for val in reversed(topo):
            val._backward()

    def nudge(self, rate):
        """Gradient-descent step on a leaf, then clear its gradient."""
        self.data -= rate * self.grad
        self.grad = 0.0

    def __repr__(self):
        return f"Value(label={self.label!r}, data={self.data}, grad={self.grad})"


# functional spelling of the operators above


def constant(value, label=""):
    return Value(value, label)


def add(a, b):
    return a + b


def subtract(a, b):
    return a - b


def multiply(a, b):
    return a * b


def negate(a):
    return -a


def power(a, exponent):
    return a**exponent


def hyperbolic_tangent(a):
    return a.tanh()


def backpropagate(root):
    root.backward()


def nudge(node, rate):
    node.nudge(rate)
