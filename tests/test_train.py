import pytest

from scalargrad.engine import Value
from scalargrad.train import mse_loss, trace_neuron, train


def test_mse_loss():
    loss = mse_loss([Value(0.5), Value(-1.0)], [1.0, -1.0])

    assert loss.data == 0.25


def test_loss_decreases():
    _, losses = train(max_iter=30, verbose=False)

    assert len(losses) == 30
    assert losses[-1] < losses[0]


def test_train_reproducible():
    _, a = train(max_iter=5, seed=7, verbose=False)
    _, b = train(max_iter=5, seed=7, verbose=False)

    assert a == b


def test_train_logs_progress(capsys):
    train(max_iter=3, log_every=1)

    out = capsys.readouterr().out
    assert "TRAINING START" in out
    assert "iter 2: loss" in out
    assert "TRAINING FINISH" in out


def test_trace_neuron(capsys):
    o = trace_neuron()

    assert o.data == pytest.approx(0.7071067, abs=1e-6)
    assert o.grad == 1.0
    assert "x1: x1 = 2.0, grad: " in capsys.readouterr().out
