import random
from scalargrad.engine import Value


class DimensionMismatch(ValueError):
    def __init__(self, expected, actual):
        super().__init__(f"Dimension mismatch, expected {expected} inputs, got {actual}")
        self.expected = expected
        self.actual = actual


def _check_inputs(expected, x):
    if len(x) != expected:
        raise DimensionMismatch(expected, len(x))


class Neuron:
    # weights/bias given explicitly skip the random draw
    def __init__(self, nin=0, rng=None, weights=None, bias=None):
        rng = rng or random
        if weights is None:
            weights = [Value(rng.uniform(-1, 1), f"w_{i}") for i in range(nin)]
        if bias is None:
            bias = Value(rng.uniform(-1, 1), "b")
        self.weights = list(weights)
        self.bias = bias

    def __call__(self, x):
        _check_inputs(len(self.weights), x)
        # fold left from the bias: ((b + w0*x0) + w1*x1) + ...
        out = self.bias
        for wi, xi in zip(self.weights, x):
            out = out + wi * xi
        return out.tanh()

    evaluate = __call__

    def parameters(self):
        return self.weights + [self.bias]

    def nudge_parameters(self, rate):
        for p in self.parameters():
            p.nudge(rate)


class Layer:
    #  nout = num neurons in layer
    def __init__(self, nin, nout, rng=None):
        self.nin = nin
        self.neurons = [Neuron(nin, rng=rng) for _ in range(nout)]

    def __call__(self, x):
        _check_inputs(self.nin, x)
        return [n(x) for n in self.neurons]

    evaluate = __call__

    def parameters(self):
        return [p for n in self.neurons for p in n.parameters()]

    def nudge_parameters(self, rate):
        for n in self.neurons:
            n.nudge_parameters(rate)


class MLP:
    # nouts = list of layer sizes
    # e.g. [4, 4, 1] = two 4-neuron layers + one 1-neuron output
    def __init__(self, nin, nouts, rng=None):
        self.nin = nin
        sizes = [nin] + list(nouts)
        self.layers = [Layer(sizes[i], sizes[i + 1], rng=rng) for i in range(len(nouts))]

    def __call__(self, x):
        _check_inputs(self.nin, x)
        for layer in self.layers:
            x = layer(x)
        return x

    predict = __call__

    def parameters(self):
        return [p for layer in self.layers for p in layer.parameters()]

    def nudge_parameters(self, rate):
        for layer in self.layers:
            layer.nudge_parameters(rate)
