import random
import time
from scalargrad.engine import Value
from scalargrad.nn import MLP

#### hyper-parameters ####
layer_sizes = [4, 4, 1]
learning_rate = 0.05
max_iter = 50
seed = 1337
log_every = 10
#### ---------------- ####

# tiny binary classifier dataset
xs = [
    [2.0, 3.0, -1.0],
    [3.0, -1.0, 0.5],
    [0.5, 1.0, 1.0],
    [1.0, 1.0, -1.0],
]
ys = [1.0, -1.0, -1.0, 1.0]


def mse_loss(predictions, targets):
    return sum(((yout - ygt) ** 2 for yout, ygt in zip(predictions, targets)), Value(0.0, "0"))


def train(
    xs=xs,
    ys=ys,
    *,
    layer_sizes=layer_sizes,
    learning_rate=learning_rate,
    max_iter=max_iter,
    seed=seed,
    log_every=log_every,
    verbose=True,
):
    mlp = MLP(len(xs[0]), layer_sizes, rng=random.Random(seed))
    losses = []

    if verbose:
        print(f"\nModel size: {len(mlp.parameters())} parameters\n")
        print("---------- TRAINING START ----------")
    start = time.perf_counter()
    for i in range(max_iter):
        # forward pass, one output neuron per sample
        ypred = [mlp(x)[0] for x in xs]
        loss = mse_loss(ypred, ys)
        # nudge clears gradients, so every graph starts from zero
        loss.backward()
        mlp.nudge_parameters(learning_rate)
        losses.append(loss.data)
        if verbose and (i % log_every == 0 or i == max_iter - 1):
            print(f"iter {i}: loss {loss.data:.4f}")
    elapsed = time.perf_counter() - start

    if verbose:
        print("---------- TRAINING FINISH ----------\n")
        print(f"Total elapsed time: {elapsed:.3f}s")
        print("Final predictions:", [round(mlp(x)[0].data, 4) for x in xs], "\n")
    return mlp, losses


def trace_neuron():
    # hand-wired neuron: o = tanh(x1*w1 + x2*w2 + b)
    x1 = Value(2.0, "x1")
    x2 = Value(0.0, "x2")
    w1 = Value(-3.0, "w1")
    w2 = Value(1.0, "w2")
    b = Value(6.88137358, "b")

    n = x1 * w1 + x2 * w2 + b
    o = n.tanh()

    for name, v in (("n", n), ("o", o)):
        print(f"{name}: {v.label} = {v.data}, grad: {v.grad}")

    o.backward()

    for name, v in (("n", n), ("o", o), ("b", b), ("x1", x1)):
        print(f"{name}: {v.label} = {v.data}, grad: {v.grad}")
    return o


if __name__ == "__main__":
    trace_neuron()
    train()
